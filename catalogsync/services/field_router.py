"""
Field update router
Maps a field name and value to the patch sent to the product update endpoint
"""

import logging
from typing import Any, Dict, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from catalogsync.exceptions import UnsupportedFieldError, ValidationError
from catalogsync.models.product import Product
from catalogsync.models.fields import (
    FieldUpdate,
    NameUpdate,
    VisibilityUpdate,
    TagsUpdate,
    CategoriesUpdate,
    PriceUpdate,
    StockUpdate,
    SUPPORTED_FIELDS
)

logger = logging.getLogger(__name__)

_field_update_adapter = TypeAdapter(FieldUpdate)


def parse_field_update(field: str, value: Any) -> FieldUpdate:
    """
    Build the typed update for a field

    Raises:
        UnsupportedFieldError: Field is not editable
        ValidationError: Value has the wrong type for the field
    """
    if field not in SUPPORTED_FIELDS:
        raise UnsupportedFieldError(field)

    try:
        return _field_update_adapter.validate_python({"field": field, "value": value})
    except PydanticValidationError as e:
        reason = e.errors()[0].get("msg", "invalid value")
        raise ValidationError(f"Invalid value for field '{field}': {reason}")


def to_patch(update: FieldUpdate) -> Dict[str, Any]:
    """Patch body for an update; empty for price and stock (variant-level, not supported)"""
    if isinstance(update, NameUpdate):
        return {"name": update.value}
    if isinstance(update, VisibilityUpdate):
        return {"isVisible": update.value}
    if isinstance(update, TagsUpdate):
        return {"tags": list(dict.fromkeys(update.value))}
    if isinstance(update, CategoriesUpdate):
        return {"categories": list(dict.fromkeys(update.value))}
    if isinstance(update, (PriceUpdate, StockUpdate)):
        return {}
    raise UnsupportedFieldError(getattr(update, "field", type(update).__name__))


def build_patch(field: str, value: Any) -> Dict[str, Any]:
    return to_patch(parse_field_update(field, value))


async def apply_field_update(client, product_id: str, update: FieldUpdate) -> Optional[Product]:
    """
    Send the update for one product

    An empty patch makes no network call.

    Returns:
        The updated product, or None when nothing was sent
    """
    patch = to_patch(update)

    if not patch:
        logger.warning(f"{update.field} update for product {product_id} not applied: variant updates are not supported")
        return None

    return await client.update(product_id, patch)
