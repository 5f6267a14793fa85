"""Hash-map operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from typedcache_core.models.results import WriteResult
from typedcache_infra.cache.base import TTL, StoreBound, coerce, normalize_ttl

T = TypeVar("T")


class HashOperations(StoreBound):
    """Bulk put/read of string-keyed maps stored under one key."""

    def set_map(
        self,
        key: str,
        mapping: Mapping[str, Any],
        ttl_seconds: TTL | None = None,
    ) -> WriteResult:
        """Write all fields in one command, then apply a TTL separately."""
        ttl = normalize_ttl(ttl_seconds)
        if not mapping:
            return WriteResult(key=key, ttl_seconds=ttl, ttl_confirmed=ttl is None, written=False)
        self._store.put_fields(key, mapping)
        return self._apply_ttl(key, ttl)

    def get_map(self, key: str, as_type: type[T] | None = None) -> dict[str, T | Any]:
        """Return every field; a missing key gives an empty dict."""
        return {
            field: coerce(value, as_type, key) for field, value in self._store.fields(key).items()
        }
