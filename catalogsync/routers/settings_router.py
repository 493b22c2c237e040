"""
Settings Router
Connect, inspect and disconnect the user's Squarespace store
"""

from fastapi import APIRouter, Depends, HTTPException, status

from catalogsync.database import get_database
from catalogsync.middleware.auth_middleware import verify_user
from catalogsync.models.credentials import ApiKeysSave, ApiKeysStatus
from catalogsync.services.credentials_service import CredentialsService

router = APIRouter()


@router.put("/api-keys", response_model=ApiKeysStatus)
async def save_api_keys(
    request: ApiKeysSave,
    user_id: str = Depends(verify_user)
):
    """Save the store API key (encrypted) and store URL"""
    db = await get_database()
    saved = await CredentialsService(db).save_api_keys(
        user_id=user_id,
        api_key=request.api_key,
        store_url=str(request.store_url)
    )

    return ApiKeysStatus(
        connected=True,
        store_url=saved["store_url"],
        updated_at=saved["updated_at"].isoformat()
    )


@router.get("/api-keys", response_model=ApiKeysStatus)
async def get_api_keys_status(user_id: str = Depends(verify_user)):
    """Whether a store is connected; the key itself is never returned"""
    db = await get_database()
    stored = await CredentialsService(db).get_status(user_id)

    if not stored:
        return ApiKeysStatus(connected=False)

    updated_at = stored.get("updated_at")
    return ApiKeysStatus(
        connected=True,
        store_url=stored.get("store_url"),
        updated_at=updated_at.isoformat() if updated_at else None
    )


@router.delete("/api-keys", status_code=status.HTTP_204_NO_CONTENT)
async def delete_api_keys(user_id: str = Depends(verify_user)):
    """Disconnect the store"""
    db = await get_database()
    deleted = await CredentialsService(db).delete_api_keys(user_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No store connected"
        )
