"""
Product models
Mirrors the Squarespace commerce product representation
"""

from pydantic import BaseModel, Field
from typing import List, Dict, Optional
from datetime import datetime


class Money(BaseModel):
    """Amount in a given currency, value kept as the API's decimal string"""
    currency: str = "USD"
    value: str = "0.00"


class Pricing(BaseModel):
    """Variant pricing"""
    base_price: Money = Field(default_factory=Money, alias="basePrice")
    sale_price: Optional[Money] = Field(None, alias="salePrice")
    on_sale: bool = Field(False, alias="onSale")

    class Config:
        populate_by_name = True


class Stock(BaseModel):
    """Variant stock level"""
    quantity: int = 0
    unlimited: bool = False


class ProductVariant(BaseModel):
    """A purchasable variant of a product"""
    id: str
    sku: Optional[str] = None
    pricing: Pricing = Field(default_factory=Pricing)
    stock: Optional[Stock] = None
    attributes: Dict[str, str] = Field(default_factory=dict)


class ProductImage(BaseModel):
    """Product image reference"""
    id: str
    url: Optional[str] = None
    alt_text: Optional[str] = Field(None, alias="altText")

    class Config:
        populate_by_name = True


class SeoOptions(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class Product(BaseModel):
    """A single catalog item"""
    id: str
    type: str = "PHYSICAL"
    store_page_id: Optional[str] = Field(None, alias="storePageId")
    name: str = ""
    description: Optional[str] = None  # HTML content
    url: Optional[str] = None
    url_slug: Optional[str] = Field(None, alias="urlSlug")
    variants: List[ProductVariant] = Field(default_factory=list)
    images: List[ProductImage] = Field(default_factory=list)
    is_visible: bool = Field(True, alias="isVisible")
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    seo_options: Optional[SeoOptions] = Field(None, alias="seoOptions")
    created_on: Optional[datetime] = Field(None, alias="createdOn")
    modified_on: Optional[datetime] = Field(None, alias="modifiedOn")

    class Config:
        populate_by_name = True


class Pagination(BaseModel):
    """Cursor pagination block of a listing page"""
    has_next_page: bool = Field(False, alias="hasNextPage")
    next_page_cursor: Optional[str] = Field(None, alias="nextPageCursor")
    next_page_url: Optional[str] = Field(None, alias="nextPageUrl")

    class Config:
        populate_by_name = True


class ProductsPage(BaseModel):
    """One page of the product listing endpoint"""
    products: List[Product] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
