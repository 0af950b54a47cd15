"""Library configuration using pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PropconfConfig(BaseSettings):
    """How resolvers built by ``settings_from_config`` are set up.

    Read from ``PROPCONF_*`` environment variables and an optional ``.env``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPCONF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False, description="Render log records as JSON")
    prefix: str = Field(default="", description="Prefix for every setting name")
    wrap_in_environment: bool = Field(
        default=True, description="Let environment variables override properties"
    )
    log_sensitive_data: bool = Field(
        default=False, description="Log sensitive values instead of a placeholder"
    )
    cached: bool = Field(default=True, description="Memoize resolved values")
