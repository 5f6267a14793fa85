"""List operations: head-push, full-range read, reset-and-replace, queue pop."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import structlog

from typedcache_core.models.results import WriteResult
from typedcache_infra.cache.base import TTL, StoreBound, coerce, normalize_ttl, reject_text

logger = structlog.get_logger()

T = TypeVar("T")


class ListOperations(StoreBound):
    """Operations on list-valued keys.

    Items are pushed onto the head, so a list read back after ``set_list``
    is in reverse input order.
    """

    def set_list(
        self,
        key: str,
        items: Sequence[Any],
        ttl_seconds: TTL | None = None,
    ) -> WriteResult:
        """Push every item onto the head of the list, then apply a TTL.

        Existing items are kept. The TTL is a separate round trip after the push.
        """
        reject_text(items)
        ttl = normalize_ttl(ttl_seconds)
        if not items:
            return WriteResult(key=key, ttl_seconds=ttl, ttl_confirmed=ttl is None, written=False)
        self._store.push_head(key, *items)
        return self._apply_ttl(key, ttl)

    def set_list_reset(
        self,
        key: str,
        items: Sequence[Any],
        ttl_seconds: TTL | None = None,
    ) -> WriteResult:
        """Replace the list with exactly ``items``.

        Costs one extra round trip (the delete) over ``set_list``. The three
        steps are not atomic; a concurrent push between the delete and the
        push survives.
        """
        reject_text(items)
        ttl = normalize_ttl(ttl_seconds)
        self._store.delete(key)
        logger.debug("list_reset", key=key, size=len(items))
        if not items:
            return WriteResult(key=key, ttl_seconds=ttl, ttl_confirmed=ttl is None, written=False)
        self._store.push_head(key, *items)
        return self._apply_ttl(key, ttl)

    def get_list(self, key: str, as_type: type[T] | None = None) -> list[T | Any]:
        """Return every item in the list, head first. Missing key gives []."""
        items = self._store.list_range(key, 0, -1)
        return [coerce(item, as_type, key) for item in items]

    def left_push(self, key: str, value: Any) -> int:  # noqa: ANN401
        """Push one value onto the head. Returns the new length."""
        return self._store.push_head(key, value)

    def right_pop(self, key: str, as_type: type[T] | None = None) -> T | Any | None:  # noqa: ANN401
        """Pop one value from the tail, or None when the list is empty."""
        return coerce(self._store.pop_tail(key), as_type, key)
