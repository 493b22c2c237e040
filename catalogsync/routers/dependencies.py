"""
Shared router dependencies
"""

from fastapi import Depends

from catalogsync.client import get_catalog_client
from catalogsync.database import get_database
from catalogsync.middleware.auth_middleware import verify_user
from catalogsync.services.bulk_edit_service import BulkEditService


async def get_bulk_edit_service(user_id: str = Depends(verify_user)):
    """A BulkEditService over a fresh client for the user's store, closed after the request"""
    db = await get_database()
    client = await get_catalog_client(user_id, db)

    try:
        yield BulkEditService(client)
    finally:
        await client.aclose()
