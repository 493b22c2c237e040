"""
Store credential models
"""

from pydantic import BaseModel, Field, HttpUrl, field_validator
from typing import Optional


class SquarespaceConfig(BaseModel):
    """Decrypted connection details for one store"""
    api_key: str = Field(..., min_length=1, repr=False)
    store_url: str = Field(..., min_length=1)


class ApiKeysSave(BaseModel):
    """Settings form submission"""
    api_key: str = Field(..., min_length=1, description="Squarespace API key")
    store_url: HttpUrl = Field(..., description="Store URL")

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("API Key is required")
        return value

    class Config:
        json_schema_extra = {
            "example": {
                "api_key": "sq_live_...",
                "store_url": "https://my-store.squarespace.com"
            }
        }


class ApiKeysStatus(BaseModel):
    """What the settings page shows; never includes the key itself"""
    connected: bool
    store_url: Optional[str] = None
    updated_at: Optional[str] = None
