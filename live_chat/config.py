"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings container."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: Literal["development", "staging", "production"] = "development"

    mongodb_uri: str = ""
    mongodb_server_selection_timeout_ms: int = Field(30000, gt=0)
    mongodb_required: bool = False

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "json"
    log_file_path: str = ""

    @field_validator("mongodb_uri", mode="before")
    @classmethod
    def normalize_mongodb_uri(cls, value: str) -> str:
        raw = str(value).strip()
        double_prefix = "MONGODB_URI="
        if raw.upper().startswith(double_prefix):
            return raw[len(double_prefix) :]
        return raw


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
