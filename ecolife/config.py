"""Application configuration using Pydantic Settings."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"

    # Remote document store (per-user productivity records)
    mongodb_url: Optional[str] = None
    mongodb_db_name: str = "ecolife"
    productivity_collection: str = "productivity"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
