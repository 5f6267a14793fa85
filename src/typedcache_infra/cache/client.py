"""CacheClient: one typed API over a single injected store handle."""

from __future__ import annotations

from types import TracebackType

from typedcache_core.constants import DEFAULT_KEY_SEPARATOR
from typedcache_core.interfaces.store import StoreHandle
from typedcache_infra.cache.hashes import HashOperations
from typedcache_infra.cache.keys import build_key, build_pattern
from typedcache_infra.cache.lifecycle import KeyLifecycleOperations
from typedcache_infra.cache.lists import ListOperations
from typedcache_infra.cache.scalar import ScalarOperations
from typedcache_infra.cache.sets import SetOperations


class CacheClient(
    ScalarOperations,
    ListOperations,
    SetOperations,
    HashOperations,
    KeyLifecycleOperations,
):
    """Typed cache operations for scalars, lists, sets and hashes.

    The store handle is built once by the caller and injected here; the
    operation groups never call each other and share nothing but the store.
    There is no retry logic: a transport failure surfaces immediately as
    StoreUnavailableError. Writes that need a separate expire call report
    whether the TTL stuck via ``WriteResult.ttl_confirmed``.
    """

    def __init__(self, store: StoreHandle, key_separator: str = DEFAULT_KEY_SEPARATOR) -> None:
        """Initialize with a StoreHandle and the separator used by ``key()``."""
        super().__init__(store)
        self._key_separator = key_separator

    def key(self, *parts: object) -> str:
        """Build a key from components with this client's separator."""
        return build_key(*parts, sep=self._key_separator)

    def pattern(self, *parts: object) -> str:
        """Build a glob pattern covering every key under a prefix."""
        return build_pattern(*parts, sep=self._key_separator)

    def ping(self) -> bool:
        """Return True when the store answers."""
        return self._store.ping()

    def close(self) -> None:
        """Close the underlying store handle."""
        self._store.close()

    def __enter__(self) -> CacheClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
