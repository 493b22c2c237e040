"""
Bulk edit models
Request bodies and the Outcome report returned by every bulk operation
"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Union


class FailedItem(BaseModel):
    """A product the operation could not be applied to"""
    id: str
    error: str


class Outcome(BaseModel):
    """Result of a bulk operation: every input id lands in exactly one list"""
    success: List[str] = Field(default_factory=list)
    failed: List[FailedItem] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "success": ["5f1a2b3c"],
                "failed": [{"id": "5f1a2b3d", "error": "Squarespace API error: Internal Server Error"}]
            }
        }


class MergeAction(str, Enum):
    """Collection field operation"""
    ADD = "add"
    REMOVE = "remove"


class PriceAdjustmentType(str, Enum):
    PERCENT = "percent"
    FIXED = "fixed"


class PriceAdjustment(BaseModel):
    """Bulk price change"""
    type: PriceAdjustmentType
    value: float


class BulkVisibilityRequest(BaseModel):
    ids: List[str] = Field(..., description="Product IDs")
    is_visible: bool = Field(..., description="Visibility to set")


class BulkPriceRequest(BaseModel):
    ids: List[str] = Field(..., description="Product IDs")
    adjustment: PriceAdjustment


class BulkDeleteRequest(BaseModel):
    ids: List[str] = Field(..., description="Product IDs to delete")


class BulkTagsRequest(BaseModel):
    ids: List[str] = Field(..., description="Product IDs")
    action: MergeAction
    tags: List[str] = Field(..., description="Tags to add or remove")


class BulkCategoriesRequest(BaseModel):
    ids: List[str] = Field(..., description="Product IDs")
    action: MergeAction
    categories: List[str] = Field(..., description="Categories to add or remove")


class ProductFieldUpdateRequest(BaseModel):
    """Single field edit from the products table"""
    field: str = Field(..., description="Field name, e.g. name, isVisible, tags")
    value: Union[bool, str, float, int, List[str], None] = None

    class Config:
        json_schema_extra = {
            "example": {"field": "tags", "value": ["sale", "new"]}
        }
