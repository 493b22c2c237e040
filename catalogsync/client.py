"""
HTTP client for the Squarespace Commerce API
"""

import logging
import httpx
from typing import Dict, Any, List, Optional
from catalogsync.config import settings
from catalogsync.models.product import Product, ProductsPage
from catalogsync.models.credentials import SquarespaceConfig
from catalogsync.services.credentials_service import CredentialsService
from catalogsync.exceptions import (
    TransportError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    BatchSizeExceeded,
    ConfigurationError
)

logger = logging.getLogger(__name__)

# The batch-get endpoint rejects more ids than this
MAX_BATCH_SIZE = 50


class SquarespaceClient:
    """Low-level async HTTP client for one Squarespace store"""

    def __init__(
        self,
        api_key: str,
        store_url: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Squarespace client

        Args:
            api_key: Store API key
            store_url: Public store URL (informational)
            base_url: API base URL (default: settings.SQUARESPACE_API_URL)
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (used by tests)
        """
        self.store_url = store_url
        self.base_url = (base_url or settings.SQUARESPACE_API_URL).rstrip('/')
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "User-Agent": user_agent or settings.USER_AGENT
            },
            timeout=timeout or settings.REQUEST_TIMEOUT,
            transport=transport
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        await self.session.aclose()

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Make HTTP request to API

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API endpoint relative to the base URL
            params: Query parameters
            json: JSON body

        Returns:
            Response data as dictionary (empty for bodiless responses)

        Raises:
            TransportError: On non-success status or network failure
        """
        logger.debug(f"{method} {endpoint} params={params}")

        try:
            response = await self.session.request(
                method,
                f"/{endpoint.lstrip('/')}",
                params=params,
                json=json
            )
        except httpx.TimeoutException:
            raise TransportError("Request timeout", status_code=408)
        except httpx.HTTPError as e:
            raise TransportError(f"Connection failed: {str(e)}", status_code=503)

        if response.status_code >= 400:
            self._handle_error(response)

        if not response.content:
            return {}
        return response.json()

    def _handle_error(self, response: httpx.Response):
        """Handle API error responses"""
        message = f"Squarespace API error: {response.reason_phrase or response.status_code}"

        if response.status_code == 401:
            raise AuthenticationError(message, status_code=401)
        elif response.status_code == 404:
            raise NotFoundError(message, status_code=404)
        elif response.status_code == 429:
            raise RateLimitError(message, status_code=429)
        else:
            raise TransportError(message, status_code=response.status_code)

    async def list(
        self,
        type: Optional[str] = None,
        cursor: Optional[str] = None,
        modified_after: Optional[str] = None,
        modified_before: Optional[str] = None
    ) -> ProductsPage:
        """
        Fetch one page of products

        Args:
            type: 'PHYSICAL', 'DIGITAL' or 'PHYSICAL,DIGITAL'
            cursor: Cursor from the previous page
            modified_after: ISO timestamp, only sent together with modified_before
            modified_before: ISO timestamp, only sent together with modified_after

        Returns:
            ProductsPage
        """
        params = {}

        if type:
            params["type"] = type
        elif not cursor:
            params["type"] = settings.DEFAULT_PRODUCT_TYPES

        if cursor:
            params["cursor"] = cursor

        if modified_after and modified_before:
            params["modifiedAfter"] = modified_after
            params["modifiedBefore"] = modified_before

        response = await self._request("GET", "commerce/products", params=params)
        return ProductsPage.model_validate(response)

    async def get_many(self, ids: List[str]) -> List[Product]:
        """
        Fetch up to MAX_BATCH_SIZE products in one call

        Raises:
            BatchSizeExceeded: If more than MAX_BATCH_SIZE ids are given
        """
        if len(ids) > MAX_BATCH_SIZE:
            raise BatchSizeExceeded(len(ids), MAX_BATCH_SIZE)
        if not ids:
            return []

        response = await self._request("GET", f"commerce/products/{','.join(ids)}")
        return [Product.model_validate(item) for item in response.get("products", [])]

    async def get(self, product_id: str) -> Optional[Product]:
        """Fetch a single product, None if it does not exist"""
        try:
            response = await self._request("GET", f"commerce/products/{product_id}")
        except NotFoundError:
            return None

        products = response.get("products")
        if products is None:
            return Product.model_validate(response) if response else None
        return Product.model_validate(products[0]) if products else None

    async def update(self, product_id: str, patch: Dict[str, Any]) -> Product:
        """
        Apply a partial update to a product

        Args:
            product_id: Product ID
            patch: Only the fields being changed, in API field names

        Returns:
            The updated product
        """
        try:
            response = await self._request("POST", f"commerce/products/{product_id}", json=patch)
        except TransportError as e:
            raise type(e)(f"Failed to update product {product_id}: {e.message}", status_code=e.status_code) from e

        return Product.model_validate(response)

    async def delete(self, product_id: str) -> None:
        """Delete a product"""
        await self._request("DELETE", f"commerce/products/{product_id}")


def create_catalog_client(config: SquarespaceConfig, **kwargs) -> SquarespaceClient:
    """
    Build a fresh client for one store

    Clients are created per call and closed by the caller; nothing is cached
    between requests.
    """
    return SquarespaceClient(api_key=config.api_key, store_url=config.store_url, **kwargs)


async def get_catalog_client(user_id: str, db, **kwargs) -> SquarespaceClient:
    """
    Build a client from the user's stored credentials

    Raises:
        ConfigurationError: If no store is connected or the key cannot be decrypted
    """
    config = await CredentialsService(db).get_api_keys(user_id)

    if config is None:
        raise ConfigurationError("Squarespace configuration not found")

    return create_catalog_client(config, **kwargs)
