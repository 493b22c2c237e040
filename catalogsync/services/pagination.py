"""
Pagination walker
Drains the cursor-paginated product listing into one list
"""

import logging
from typing import List, Optional

from catalogsync.config import settings
from catalogsync.models.product import Product

logger = logging.getLogger(__name__)


async def list_all(client, type_filter: Optional[str] = None) -> List[Product]:
    """
    Fetch every product across all pages

    Any page failure propagates and no partial list is returned. Products are
    not de-duplicated: an item moved between pages during the walk can show up
    twice.

    Args:
        client: SquarespaceClient
        type_filter: 'PHYSICAL', 'DIGITAL' or both (default: settings.DEFAULT_PRODUCT_TYPES)

    Returns:
        All products in page order
    """
    type_filter = type_filter or settings.DEFAULT_PRODUCT_TYPES
    products: List[Product] = []
    cursor = None
    pages = 0

    while True:
        page = await client.list(type=type_filter, cursor=cursor)
        products.extend(page.products)
        pages += 1

        cursor = page.pagination.next_page_cursor
        if not cursor:
            break

    logger.info(f"Listed {len(products)} products ({type_filter}) across {pages} pages")
    return products
