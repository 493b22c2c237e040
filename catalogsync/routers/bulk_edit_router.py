"""
Bulk edit router
Each endpoint returns an Outcome listing succeeded and failed product ids
"""

from fastapi import APIRouter, Depends

from catalogsync.models.bulk_edit import (
    Outcome,
    BulkVisibilityRequest,
    BulkPriceRequest,
    BulkDeleteRequest,
    BulkTagsRequest,
    BulkCategoriesRequest
)
from catalogsync.routers.dependencies import get_bulk_edit_service
from catalogsync.services.bulk_edit_service import BulkEditService

router = APIRouter()


@router.post("/visibility", response_model=Outcome)
async def bulk_update_visibility(
    request: BulkVisibilityRequest,
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """Show or hide many products"""
    return await service.bulk_update_visibility(request.ids, request.is_visible)


@router.post("/prices", response_model=Outcome)
async def bulk_update_prices(
    request: BulkPriceRequest,
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """Adjust prices by percent or fixed amount (not applied yet, every id is reported as failed)"""
    return await service.bulk_update_prices(request.ids, request.adjustment)


@router.post("/delete", response_model=Outcome)
async def bulk_delete_products(
    request: BulkDeleteRequest,
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """Delete many products"""
    return await service.bulk_delete_products(request.ids)


@router.post("/tags", response_model=Outcome)
async def bulk_update_tags(
    request: BulkTagsRequest,
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """Add or remove tags on many products"""
    return await service.bulk_update_tags(request.ids, request.action, request.tags)


@router.post("/categories", response_model=Outcome)
async def bulk_update_categories(
    request: BulkCategoriesRequest,
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """Add or remove categories on many products"""
    return await service.bulk_update_categories(request.ids, request.action, request.categories)
