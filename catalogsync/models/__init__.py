from catalogsync.models.product import (
    Money,
    Pricing,
    Stock,
    ProductVariant,
    ProductImage,
    Product,
    Pagination,
    ProductsPage,
)
from catalogsync.models.bulk_edit import (
    FailedItem,
    Outcome,
    MergeAction,
    PriceAdjustment,
    PriceAdjustmentType,
)
from catalogsync.models.fields import (
    FieldUpdate,
    NameUpdate,
    VisibilityUpdate,
    TagsUpdate,
    CategoriesUpdate,
    PriceUpdate,
    StockUpdate,
    SUPPORTED_FIELDS,
)
from catalogsync.models.credentials import SquarespaceConfig
