"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typedcache_core.constants import DEFAULT_KEY_SEPARATOR, DEFAULT_SCAN_COUNT

_ALLOWED_SCHEMES = ("redis://", "rediss://", "unix://")


class Settings(BaseSettings):
    """Central configuration for typed-cache."""

    model_config = SettingsConfigDict(env_prefix="TC_", env_file=".env")

    # --- Store connection ---
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (redis://, rediss:// or unix://)",
    )
    socket_timeout_seconds: float = Field(
        default=5.0,
        description="Per-command socket timeout in seconds",
    )
    socket_connect_timeout_seconds: float = Field(
        default=5.0,
        description="Connection timeout in seconds",
    )
    max_connections: int = Field(
        default=50,
        description="Maximum connections held by the client pool",
    )
    health_check_interval_seconds: int = Field(
        default=30,
        description="Idle seconds before a pooled connection is health-checked",
    )

    # --- Key handling ---
    scan_count: int = Field(
        default=DEFAULT_SCAN_COUNT,
        description="SCAN COUNT hint used by pattern deletes",
    )
    key_separator: str = Field(
        default=DEFAULT_KEY_SEPARATOR,
        description="Separator placed between key components",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for aggregation",
    )

    @model_validator(mode="after")
    def validate_redis_url(self) -> Settings:
        """Reject URLs with a scheme redis-py cannot connect to."""
        if not self.redis_url.startswith(_ALLOWED_SCHEMES):
            msg = f"redis_url must start with one of {', '.join(_ALLOWED_SCHEMES)}"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_limits(self) -> Settings:
        """Validate numeric limits and the key separator."""
        if self.scan_count <= 0:
            msg = "scan_count must be positive"
            raise ValueError(msg)
        if self.max_connections <= 0:
            msg = "max_connections must be positive"
            raise ValueError(msg)
        if not self.key_separator:
            msg = "key_separator must not be empty"
            raise ValueError(msg)
        return self
