"""
Field update models
One typed payload per editable product field
"""

from pydantic import BaseModel, Field, StrictBool, StrictStr
from typing import Annotated, Any, List, Literal, Union


class NameUpdate(BaseModel):
    field: Literal["name"] = "name"
    value: StrictStr


class VisibilityUpdate(BaseModel):
    field: Literal["isVisible"] = "isVisible"
    value: StrictBool


class TagsUpdate(BaseModel):
    field: Literal["tags"] = "tags"
    value: List[StrictStr]


class CategoriesUpdate(BaseModel):
    field: Literal["categories"] = "categories"
    value: List[StrictStr]


class PriceUpdate(BaseModel):
    """Accepted but not applied: prices live on variants"""
    field: Literal["price"] = "price"
    value: Any = None


class StockUpdate(BaseModel):
    """Accepted but not applied: stock lives on variants"""
    field: Literal["stock"] = "stock"
    value: Any = None


FieldUpdate = Annotated[
    Union[NameUpdate, VisibilityUpdate, TagsUpdate, CategoriesUpdate, PriceUpdate, StockUpdate],
    Field(discriminator="field")
]

SUPPORTED_FIELDS = ("name", "isVisible", "tags", "categories", "price", "stock")
