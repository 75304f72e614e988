"""Runtime settings read from API_CONSOLE_* environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="API_CONSOLE_", case_sensitive=False, extra="ignore")

    base_url: str = Field(default="http://localhost:8080")
    timeout: float = Field(default=10.0, gt=0, le=600.0)
    follow_redirects: bool = Field(default=True)
    log_level: str = Field(default="WARNING")

    # Values shown in the built-in paste service documentation.
    version: str = Field(default="dev")
    healthcheck_enabled: bool = Field(default=True)
    default_ttl: str = Field(default="24h0m0s")
    default_key_length: int = Field(default=14, ge=1)
    max_key_length: int = Field(default=256, ge=1)
    unprivileged_min_key_length: int = Field(default=14, ge=1)
    privileged_min_key_length: int = Field(default=3, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
