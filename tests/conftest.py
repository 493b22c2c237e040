"""Test configuration and shared fixtures."""

import os

# Settings are read at import time
os.environ.setdefault("ENCRYPTION_KEY", "SpgLrrEEgJ/7QdhSMSvagL1juEY5eoyCG0tZN7OSQV0=")
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("MAX_CONCURRENT_REQUESTS", "10")

from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.factories import make_product


@pytest.fixture
def mock_client():
    """A stand-in for SquarespaceClient with every remote call mocked."""
    client = MagicMock()
    client.list = AsyncMock()
    client.get_many = AsyncMock(return_value=[])
    client.get = AsyncMock(return_value=None)
    client.update = AsyncMock(side_effect=lambda product_id, patch: make_product(product_id))
    client.delete = AsyncMock(return_value=None)
    client.aclose = AsyncMock()
    return client
