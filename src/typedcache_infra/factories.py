"""Factory functions for building the store and cache client from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from redis import Redis

from typedcache_infra.cache.client import CacheClient
from typedcache_infra.observability.logging import configure_logging, redact_url
from typedcache_infra.store.redis_store import RedisStore

if TYPE_CHECKING:
    from typedcache_core.config.settings import Settings

logger = structlog.get_logger()


def create_redis_client(settings: Settings) -> Redis:  # type: ignore[type-arg]
    """Create a pooled redis-py client from settings.

    Responses are decoded to str so the codec always sees text.
    """
    return Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_timeout=settings.socket_timeout_seconds,
        socket_connect_timeout=settings.socket_connect_timeout_seconds,
        health_check_interval=settings.health_check_interval_seconds,
        max_connections=settings.max_connections,
    )


def create_store(settings: Settings) -> RedisStore:
    """Create the Redis store handle."""
    return RedisStore(create_redis_client(settings), scan_count=settings.scan_count)


def create_cache_client(settings: Settings, *, configure_logs: bool = False) -> CacheClient:
    """Create a CacheClient over a freshly built store handle.

    Build one per process and pass it to the code that needs it. With
    ``configure_logs`` the process-wide logging is set up from the same
    settings first; leave it off when the host application owns logging.
    """
    if configure_logs:
        configure_logging(settings)
    logger.info(
        "cache_client_created",
        redis_url=redact_url(settings.redis_url),
        scan_count=settings.scan_count,
    )
    return CacheClient(create_store(settings), key_separator=settings.key_separator)
