# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Kitchen API"
    APP_DESC: str = "Order tickets for the kitchen"
    APP_VERSION: str = "1.0.0"

    # Storage
    STORE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = Field(default="sqlite://")

    # Serving
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # CORS origins, comma separated
    CORS_ORIGINS: str | None = None

    # Answer 405 instead of writing nothing for methods other than GET/POST
    REJECT_UNSUPPORTED_METHODS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
