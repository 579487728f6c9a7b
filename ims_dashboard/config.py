"""
Configuration - environment-driven settings via pydantic-settings.

All settings can be given as IMS_* environment variables or in a .env file.
get_settings() is cached, so there is one Settings instance per process.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dashboard settings from environment variables."""

    model_config = SettingsConfigDict(env_prefix="IMS_", env_file=".env", case_sensitive=False)

    # Remote inventory API
    api_base_url: str = "http://localhost:8080"
    api_timeout_seconds: float = 10.0

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Durable session storage
    storage_backend: Literal["memory", "file", "redis"] = "file"
    storage_path: str = ".ims_storage.json"
    redis_url: str = "redis://localhost:6379/0"
    storage_prefix: str = "ims:storage:"
    # Idle session expiry in seconds, refreshed on every write (Redis only)
    session_ttl_seconds: Optional[int] = None

    # Browser client cookie
    client_cookie_name: str = "ims_client"
    client_cookie_max_age: int = 30 * 24 * 3600
    cookie_secure: bool = False

    # Check token expiry and ask the backend on every protected page
    validate_token_on_entry: bool = True

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
