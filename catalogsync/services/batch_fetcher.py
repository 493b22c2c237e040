"""
Chunked batch fetcher
Loads current product snapshots for an arbitrary number of ids
"""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from catalogsync.client import MAX_BATCH_SIZE
from catalogsync.config import settings
from catalogsync.models.product import Product

logger = logging.getLogger(__name__)


def chunk_ids(ids: Sequence[str], size: int = MAX_BATCH_SIZE) -> List[List[str]]:
    """Split ids into ordered chunks of at most `size` (capped at MAX_BATCH_SIZE)"""
    size = max(1, min(size, MAX_BATCH_SIZE))
    return [list(ids[i:i + size]) for i in range(0, len(ids), size)]


async def fetch_many(
    client,
    ids: Sequence[str],
    batch_size: Optional[int] = None
) -> Dict[str, Product]:
    """
    Fetch products by id

    Chunks go to the batch endpoint one after another. If any chunk fails the
    batch strategy is dropped for the whole call and every id is fetched on its
    own; ids that fail or do not exist on that path are left out.

    Args:
        client: SquarespaceClient
        ids: Product IDs
        batch_size: Chunk size (default: settings.BATCH_SIZE, never above 50)

    Returns:
        Mapping of id to product; missing ids are absent, not errors
    """
    products: Dict[str, Product] = {}

    if not ids:
        return products

    try:
        for chunk in chunk_ids(ids, batch_size or settings.BATCH_SIZE):
            for product in await client.get_many(chunk):
                products[product.id] = product
    except Exception as e:
        logger.warning(f"Batch fetch failed ({e}), falling back to {len(ids)} single fetches")
        return await _fetch_each(client, ids)

    return products


async def _fetch_each(client, ids: Sequence[str]) -> Dict[str, Product]:
    products: Dict[str, Product] = {}

    async def fetch_one(product_id: str):
        try:
            product = await client.get(product_id)
        except Exception as e:
            logger.warning(f"Could not fetch product {product_id}: {e}")
            return
        if product is not None:
            products[product_id] = product

    await asyncio.gather(*(fetch_one(product_id) for product_id in dict.fromkeys(ids)))
    return products
