"""
Products Router
Product listing and single-field edits
"""

from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from catalogsync.models.bulk_edit import ProductFieldUpdateRequest
from catalogsync.models.product import Product
from catalogsync.routers.dependencies import get_bulk_edit_service
from catalogsync.services.bulk_edit_service import BulkEditService

router = APIRouter()


@router.get("/products", response_model=List[Product])
async def list_products(
    type: Optional[str] = Query(None, description="PHYSICAL, DIGITAL or PHYSICAL,DIGITAL"),
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """List every product in the connected store"""
    return await service.list_all(type)


@router.patch("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: str,
    request: ProductFieldUpdateRequest,
    service: BulkEditService = Depends(get_bulk_edit_service)
):
    """
    Update one field of a product

    Supported fields: name, isVisible, tags, categories.
    price and stock are accepted but not applied yet.
    """
    await service.update_product(product_id, request.field, request.value)
