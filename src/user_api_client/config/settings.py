from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """User client settings, read from USER_API_* environment variables by the factories"""

    model_config = SettingsConfigDict(env_prefix="USER_API_", case_sensitive=False, extra="ignore")

    # Remote service
    base_url: str = "http://localhost:8080"

    # Logging, no handler is attached while log_format is unset
    service_name: str = "user-api-client"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] | None = None


@lru_cache
def get_settings() -> ClientSettings:
    """Get cached settings instance"""
    return ClientSettings()
