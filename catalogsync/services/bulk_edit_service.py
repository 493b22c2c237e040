"""
Bulk Edit Service
Catalog operations offered to the console: listing, single-field edits and
bulk visibility, price, delete, tag and category changes
"""

import logging
from typing import Any, List, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from catalogsync.config import settings
from catalogsync.exceptions import ProductNotFoundError, ValidationError
from catalogsync.models.bulk_edit import (
    FailedItem,
    MergeAction,
    Outcome,
    PriceAdjustment
)
from catalogsync.models.fields import CategoriesUpdate, TagsUpdate, VisibilityUpdate
from catalogsync.models.product import Product
from catalogsync.services.batch_fetcher import fetch_many
from catalogsync.services.dispatcher import dispatch
from catalogsync.services.field_router import apply_field_update, parse_field_update
from catalogsync.services.merge import merge
from catalogsync.services.pagination import list_all

logger = logging.getLogger(__name__)

PRICE_UPDATES_UNSUPPORTED = "Bulk price updates are not supported yet: prices are set per variant"


class BulkEditService:
    """
    Service wrapping one store client

    Example:
        >>> async with create_catalog_client(config) as client:
        ...     service = BulkEditService(client)
        ...     outcome = await service.bulk_update_tags(ids, "add", ["sale"])
    """

    def __init__(
        self,
        client,
        batch_size: Optional[int] = None,
        max_concurrency: Optional[int] = None
    ):
        self.client = client
        self.batch_size = batch_size or settings.BATCH_SIZE
        self.max_concurrency = max_concurrency if max_concurrency is not None else settings.MAX_CONCURRENT_REQUESTS

    async def list_all(self, type_filter: Optional[str] = None) -> List[Product]:
        return await list_all(self.client, type_filter)

    async def update_product(self, product_id: str, field: str, value: Any) -> Optional[Product]:
        """
        Update one field of one product

        Raises:
            UnsupportedFieldError: Field is not editable
            ValidationError: Value has the wrong type for the field
        """
        update = parse_field_update(field, value)
        return await apply_field_update(self.client, product_id, update)

    async def bulk_update_visibility(self, ids: Sequence[str], is_visible: bool) -> Outcome:
        update = VisibilityUpdate(value=is_visible)

        async def operation(product_id: str):
            await apply_field_update(self.client, product_id, update)

        return await dispatch(ids, operation, self.max_concurrency)

    async def bulk_update_prices(
        self,
        ids: Sequence[str],
        adjustment: Union[PriceAdjustment, dict]
    ) -> Outcome:
        """
        Validate a price adjustment and report it as not applied

        Every id is returned in `failed` with an explanation; no remote call is made.
        """
        try:
            adjustment = PriceAdjustment.model_validate(adjustment)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid price adjustment: {e}")

        unique_ids = list(dict.fromkeys(ids))
        logger.warning(
            f"Bulk price update ({adjustment.type.value} {adjustment.value}) "
            f"for {len(unique_ids)} products not applied"
        )

        return Outcome(
            failed=[FailedItem(id=product_id, error=PRICE_UPDATES_UNSUPPORTED) for product_id in unique_ids]
        )

    async def bulk_delete_products(self, ids: Sequence[str]) -> Outcome:
        return await dispatch(ids, self.client.delete, self.max_concurrency)

    async def bulk_update_tags(
        self,
        ids: Sequence[str],
        action: Union[MergeAction, str],
        tags: Sequence[str]
    ) -> Outcome:
        return await self._bulk_merge(ids, action, tags, "tags")

    async def bulk_update_categories(
        self,
        ids: Sequence[str],
        action: Union[MergeAction, str],
        categories: Sequence[str]
    ) -> Outcome:
        return await self._bulk_merge(ids, action, categories, "categories")

    async def _bulk_merge(
        self,
        ids: Sequence[str],
        action: Union[MergeAction, str],
        delta: Sequence[str],
        field: str
    ) -> Outcome:
        """
        Fetch current values, merge the delta, patch each product

        An empty delta is a no-op: no calls are made and every id is reported
        in `success` without checking that the product exists.
        """
        try:
            action = MergeAction(action)
        except ValueError:
            raise ValidationError(f"Unknown action: {action}")

        unique_ids = list(dict.fromkeys(ids))

        if not unique_ids:
            return Outcome()

        # Nothing to add or remove: every product already matches
        if not delta:
            return Outcome(success=unique_ids)

        snapshots = await fetch_many(self.client, unique_ids, self.batch_size)
        update_type = TagsUpdate if field == "tags" else CategoriesUpdate

        async def operation(product_id: str):
            product = snapshots.get(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            values = merge(getattr(product, field), action, delta)
            await apply_field_update(self.client, product_id, update_type(value=values))

        return await dispatch(unique_ids, operation, self.max_concurrency)
