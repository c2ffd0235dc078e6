"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    cloudinary_api_key: str
    cloudinary_api_secret: str
    cloudinary_cloud_name: str
    cloudinary_api_url: str = "https://api.cloudinary.com/v1_1"
    max_results: int = 400
    content_root: Path = Path("./albums")
    http_timeout_seconds: float | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def api_base_url(self) -> str:
        """Return the account-scoped Admin API base URL."""
        return f"{self.cloudinary_api_url.rstrip('/')}/{self.cloudinary_cloud_name}"
