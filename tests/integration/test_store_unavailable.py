"""Transport failures surface as StoreUnavailableError without a live server."""

from __future__ import annotations

import pytest

from tests.mocks.mock_settings import make_real_settings
from typedcache_core.exceptions import StoreUnavailableError
from typedcache_infra.factories import create_cache_client

pytestmark = pytest.mark.integration


def test_unreachable_store_raises() -> None:
    """A refused connection surfaces immediately instead of returning a default."""
    cache = create_cache_client(
        make_real_settings(redis_url="redis://localhost:1/0", socket_connect_timeout_seconds=0.5)
    )
    with pytest.raises(StoreUnavailableError):
        cache.get_value("k")
    with pytest.raises(StoreUnavailableError):
        cache.set_value("k", "v", ttl_seconds=10)
    cache.close()
