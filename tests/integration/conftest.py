"""Integration test fixtures: a real Redis on localhost, DB 1."""

from __future__ import annotations

import socket
import time
from collections.abc import Generator

import pytest

from tests.mocks.mock_settings import make_real_settings
from typedcache_infra.cache.client import CacheClient
from typedcache_infra.factories import create_redis_client
from typedcache_infra.store.redis_store import RedisStore

# ---------------------------------------------------------------------------
# Service health check (with retry for CI container start-up)
# ---------------------------------------------------------------------------


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 5,
    delay: float = 1.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379, retries=3)

require_redis = pytest.mark.skipif(
    not _redis_up,
    reason="Redis not reachable on localhost:6379",
)


# ---------------------------------------------------------------------------
# Redis fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def redis_cache() -> Generator[CacheClient, None, None]:
    """Function-scoped CacheClient on test DB 1, flushed before and after each test."""
    if not _redis_up:
        pytest.skip("Redis not available")

    settings = make_real_settings()
    redis_client = create_redis_client(settings)
    cache = CacheClient(RedisStore(redis_client, scan_count=settings.scan_count))
    redis_client.flushdb()
    yield cache
    redis_client.flushdb()
    cache.close()
