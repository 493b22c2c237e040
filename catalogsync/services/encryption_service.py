"""
Encryption Service
Protects stored store credentials at rest using AES-256-GCM
"""

import os
import base64
import binascii
import logging
from typing import Optional
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from catalogsync.config import settings
from catalogsync.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

NONCE_SIZE = 12  # 96-bit nonce for GCM
KEY_SIZE = 32  # AES-256


class EncryptionService:
    """
    Service for encrypting and decrypting secrets at rest

    The key is provisioned externally (ENCRYPTION_KEY, base64) and never leaves
    this object.
    """

    def __init__(self, key: Optional[str] = None):
        """
        Initialize encryption service

        Args:
            key: Base64 encoded 32 byte key (default: settings.ENCRYPTION_KEY)

        Raises:
            ConfigurationError: If the key is missing or malformed
        """
        key = key or settings.ENCRYPTION_KEY

        if not key:
            raise ConfigurationError("ENCRYPTION_KEY environment variable is required")

        try:
            key_bytes = base64.b64decode(key, validate=True)
        except (binascii.Error, ValueError):
            raise ConfigurationError("ENCRYPTION_KEY must be base64 encoded")

        if len(key_bytes) != KEY_SIZE:
            raise ConfigurationError(f"ENCRYPTION_KEY must decode to {KEY_SIZE} bytes")

        self._aesgcm = AESGCM(key_bytes)

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext

        Returns:
            base64(nonce + ciphertext), the ciphertext carrying the GCM tag
        """
        nonce = os.urandom(NONCE_SIZE)
        ciphertext = self._aesgcm.encrypt(nonce, plaintext.encode('utf-8'), None)
        return base64.b64encode(nonce + ciphertext).decode('utf-8')

    def decrypt(self, encrypted_data: str) -> str:
        """
        Decrypt data produced by encrypt()

        Raises:
            ConfigurationError: If the data is corrupt or was encrypted with another key
        """
        try:
            data = base64.b64decode(encrypted_data.encode('utf-8'), validate=True)
            nonce = data[:NONCE_SIZE]
            ciphertext = data[NONCE_SIZE:]
            plaintext = self._aesgcm.decrypt(nonce, ciphertext, None)
            return plaintext.decode('utf-8')
        except (InvalidTag, binascii.Error, ValueError) as e:
            logger.error(f"Decryption error: {type(e).__name__}")
            raise ConfigurationError("Stored credentials could not be decrypted")


def generate_encryption_key() -> str:
    """Generate a new key (run once, store in the environment)"""
    return base64.b64encode(os.urandom(KEY_SIZE)).decode('utf-8')
