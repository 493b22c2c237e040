"""
CatalogSync - bulk edit engine for a Squarespace catalog
Batch fetching, set merges and concurrent per-product mutations
"""

__version__ = "1.0.0"

from .client import SquarespaceClient, create_catalog_client, get_catalog_client
from .services.bulk_edit_service import BulkEditService
from .models.bulk_edit import Outcome, FailedItem, MergeAction, PriceAdjustment
from .exceptions import (
    CatalogSyncError,
    TransportError,
    AuthenticationError,
    RateLimitError,
    ConfigurationError,
    ValidationError,
    UnsupportedFieldError,
    BatchSizeExceeded,
    ProductNotFoundError
)

__all__ = [
    "SquarespaceClient",
    "create_catalog_client",
    "get_catalog_client",
    "BulkEditService",
    "Outcome",
    "FailedItem",
    "MergeAction",
    "PriceAdjustment",
    "CatalogSyncError",
    "TransportError",
    "AuthenticationError",
    "RateLimitError",
    "ConfigurationError",
    "ValidationError",
    "UnsupportedFieldError",
    "BatchSizeExceeded",
    "ProductNotFoundError"
]
