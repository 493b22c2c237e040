"""
Configuration Settings
Environment variables and application settings
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # MongoDB
    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "catalogsync"

    # Credentials at rest (base64 encoded 32 byte key)
    ENCRYPTION_KEY: Optional[str] = None

    # Squarespace API
    SQUARESPACE_API_URL: str = "https://api.squarespace.com/v2"
    USER_AGENT: str = "CatalogSync/1.0"
    REQUEST_TIMEOUT: float = 30.0
    DEFAULT_PRODUCT_TYPES: str = "PHYSICAL,DIGITAL"

    # Bulk operations
    BATCH_SIZE: int = 50  # batch-get endpoint accepts at most 50 ids
    MAX_CONCURRENT_REQUESTS: Optional[int] = 10

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> list:
        """ALLOWED_ORIGINS split into a list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"


settings = Settings()
