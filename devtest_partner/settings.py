"""Runtime configuration for the DevTest Partner service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field("DevTest Partner API")
    app_version: str = Field("1.0.0")
    log_level: str = Field("INFO")

    # Default DevTest Registry, used unless a request overrides it
    devtest_host: str = Field("localhost")
    devtest_port: str = Field("1505")
    devtest_username: str = Field("admin")
    devtest_password: SecretStr = Field(SecretStr(""))

    # None keeps the transport waiting until the registry answers
    devtest_timeout: Optional[float] = Field(None)
    devtest_workspace: str = Field(".")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
