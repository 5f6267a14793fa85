"""Set operations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from typedcache_core.exceptions import TypeMismatchError
from typedcache_core.models.results import WriteResult
from typedcache_infra.cache.base import TTL, StoreBound, coerce, normalize_ttl, reject_text

T = TypeVar("T")


class SetOperations(StoreBound):
    """Operations on set-valued keys."""

    def set_members(
        self,
        key: str,
        members: Iterable[Any],
        ttl_seconds: TTL | None = None,
    ) -> WriteResult:
        """Add all members, then apply a TTL in a separate round trip."""
        reject_text(members)
        ttl = normalize_ttl(ttl_seconds)
        values = list(members)
        if not values:
            return WriteResult(key=key, ttl_seconds=ttl, ttl_confirmed=ttl is None, written=False)
        self._store.add_members(key, *values)
        return self._apply_ttl(key, ttl)

    def add_member(self, key: str, value: Any, ttl_seconds: TTL | None = None) -> WriteResult:  # noqa: ANN401
        """Add a single member, then apply a TTL in a separate round trip."""
        ttl = normalize_ttl(ttl_seconds)
        self._store.add_members(key, value)
        return self._apply_ttl(key, ttl)

    def get_members(self, key: str, as_type: type[T] | None = None) -> set[T | Any]:
        """Return all members, unordered. Missing key gives an empty set."""
        members = [coerce(member, as_type, key) for member in self._store.members(key)]
        try:
            return set(members)
        except TypeError as e:
            msg = f"Members of {key!r} are not hashable: {e}"
            raise TypeMismatchError(msg) from e

    def remove_members(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """Remove members; non-members are ignored. Returns how many were removed."""
        if not values:
            return 0
        return self._store.remove_members(key, *values)
