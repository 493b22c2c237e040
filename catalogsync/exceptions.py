"""
Custom exceptions for CatalogSync
"""

from typing import Optional


class CatalogSyncError(Exception):
    """Base exception for all CatalogSync errors"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class TransportError(CatalogSyncError):
    """Raised when the remote API answers with a non-success status"""
    pass


class AuthenticationError(TransportError):
    """Raised when the store API key is rejected"""
    pass


class NotFoundError(TransportError):
    """Raised when the requested remote resource does not exist"""
    pass


class RateLimitError(TransportError):
    """Raised when the remote API throttles the caller"""
    pass


class ConfigurationError(CatalogSyncError):
    """Raised when store credentials are missing or cannot be decrypted"""
    pass


class ValidationError(CatalogSyncError):
    """Raised when input validation fails"""
    pass


class UnsupportedFieldError(CatalogSyncError):
    """Raised when an update targets a field outside the recognized set"""
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unsupported field: {field}")


class BatchSizeExceeded(CatalogSyncError):
    """Raised when more ids are requested than the batch endpoint accepts"""
    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(f"Batch size {requested} exceeds the limit of {limit} ids")


class ProductNotFoundError(CatalogSyncError):
    """Raised inside a per-product operation when no snapshot exists"""
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}", status_code=404)
