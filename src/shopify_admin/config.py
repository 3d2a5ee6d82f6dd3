"""Client configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Shopify
    shopify_store_url: str = Field(alias="SHOPIFY_STORE_URL")
    shopify_access_token: str = Field(alias="SHOPIFY_ACCESS_TOKEN")
    shopify_api_version: Optional[str] = Field(default="2024-01", alias="SHOPIFY_API_VERSION")
    shopify_timeout: float = Field(default=30.0, alias="SHOPIFY_TIMEOUT")  # seconds

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    @property
    def shopify_base_url(self) -> str:
        """Get Shopify store base URL."""
        store = self.shopify_store_url.rstrip("/")
        if not store.startswith(("https://", "http://")):
            store = f"https://{store}"
        return store

    def mask_sensitive(self) -> dict:
        """Get settings with masked sensitive values."""
        data = self.model_dump()
        token = data.get("shopify_access_token")
        if token:
            data["shopify_access_token"] = "***" + token[-4:] if len(token) > 4 else "****"
        return data


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
