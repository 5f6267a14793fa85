"""Observability: structured logging."""

from typedcache_infra.observability.logging import (
    configure_logging,
    redact_url,
    redact_url_fields,
)

__all__ = [
    "configure_logging",
    "redact_url",
    "redact_url_fields",
]
