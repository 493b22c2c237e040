"""
Credentials Service
Stores each user's Squarespace connection with the API key encrypted
"""

import logging
from datetime import datetime
from typing import Optional, Dict, Any

from catalogsync.models.credentials import SquarespaceConfig
from catalogsync.services.encryption_service import EncryptionService

logger = logging.getLogger(__name__)


class CredentialsService:
    """Service for the user_api_keys collection"""

    def __init__(self, db, encryption: Optional[EncryptionService] = None):
        self.db = db
        self._encryption = encryption

    @property
    def encryption(self) -> EncryptionService:
        # Built lazily so a missing key only fails the calls that need it
        if self._encryption is None:
            self._encryption = EncryptionService()
        return self._encryption

    async def save_api_keys(self, user_id: str, api_key: str, store_url: str) -> Dict[str, Any]:
        """Encrypt and upsert the user's store connection"""
        now = datetime.utcnow()

        await self.db.user_api_keys.update_one(
            {"user_id": user_id},
            {
                "$set": {
                    "squarespace_api_key": self.encryption.encrypt(api_key),
                    "squarespace_store_url": store_url,
                    "updated_at": now
                },
                "$setOnInsert": {"created_at": now}
            },
            upsert=True
        )

        logger.info(f"Saved store connection for user {user_id}: {store_url}")

        return {"user_id": user_id, "store_url": store_url, "updated_at": now}

    async def get_api_keys(self, user_id: str) -> Optional[SquarespaceConfig]:
        """
        Load and decrypt the user's store connection

        Returns:
            SquarespaceConfig, or None if the user has not connected a store

        Raises:
            ConfigurationError: If the stored key cannot be decrypted
        """
        doc = await self.db.user_api_keys.find_one({"user_id": user_id})

        if not doc:
            return None

        return SquarespaceConfig(
            api_key=self.encryption.decrypt(doc["squarespace_api_key"]),
            store_url=doc["squarespace_store_url"]
        )

    async def get_status(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Connection metadata without the key"""
        doc = await self.db.user_api_keys.find_one(
            {"user_id": user_id},
            {"squarespace_store_url": 1, "updated_at": 1}
        )

        if not doc:
            return None

        return {
            "store_url": doc.get("squarespace_store_url"),
            "updated_at": doc.get("updated_at")
        }

    async def delete_api_keys(self, user_id: str) -> bool:
        """Remove the user's store connection"""
        result = await self.db.user_api_keys.delete_one({"user_id": user_id})

        if result.deleted_count:
            logger.info(f"Deleted store connection for user {user_id}")

        return result.deleted_count > 0
