"""Shared plumbing for the cache operation groups."""

from __future__ import annotations

import functools
from datetime import timedelta
from typing import Any, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from typedcache_core.exceptions import TypeMismatchError
from typedcache_core.interfaces.store import StoreHandle
from typedcache_core.models.results import WriteResult

logger = structlog.get_logger()

T = TypeVar("T")

TTL = int | timedelta


def normalize_ttl(ttl: TTL | None) -> int | None:
    """Convert a TTL to whole seconds, rejecting non-positive values.

    Only ints (seconds) and timedeltas are accepted. Floats, bools and
    strings raise TypeError instead of being truncated.
    """
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        seconds = int(ttl.total_seconds())
    elif isinstance(ttl, int) and not isinstance(ttl, bool):
        seconds = ttl
    else:
        msg = f"TTL must be an int number of seconds or a timedelta, got {type(ttl).__name__}"
        raise TypeError(msg)
    if seconds <= 0:
        msg = f"TTL must be at least one second, got {ttl!r}"
        raise ValueError(msg)
    return seconds


def reject_text(items: object) -> None:
    """Refuse a str or bytes passed where a collection of items is expected."""
    if isinstance(items, str | bytes):
        msg = f"items must be a collection of values, not {type(items).__name__}"
        raise TypeError(msg)


def require_ttl(ttl: TTL | None) -> int:
    """Like normalize_ttl, but a TTL is mandatory."""
    seconds = normalize_ttl(ttl)
    if seconds is None:
        msg = "A TTL is required for this operation"
        raise ValueError(msg)
    return seconds


@functools.lru_cache(maxsize=256)
def _adapter(as_type: Any) -> TypeAdapter[Any]:  # noqa: ANN401
    """Build (and memoize) a TypeAdapter for a requested type."""
    return TypeAdapter(as_type)


def coerce(value: Any, as_type: type[T] | None, key: str) -> T | Any:  # noqa: ANN401
    """Validate a decoded value against as_type.

    None passes through untouched since it marks an absent key.
    """
    if as_type is None or value is None:
        return value
    try:
        return _adapter(as_type).validate_python(value)
    except ValidationError as e:
        msg = f"Value at {key!r} cannot be read as {as_type!r}: {e}"
        raise TypeMismatchError(msg) from e


class StoreBound:
    """Base for operation groups that share one injected store handle."""

    def __init__(self, store: StoreHandle) -> None:
        """Initialize with a StoreHandle implementation."""
        self._store = store

    @property
    def store(self) -> StoreHandle:
        """The underlying store handle."""
        return self._store

    def _apply_ttl(self, key: str, ttl_seconds: int | None) -> WriteResult:
        """Apply a TTL with a separate expire call after a write.

        The write and the expire are two round trips. A reader between them
        sees the value without its expiry; if the key vanished in the gap the
        result reports the TTL as unconfirmed.
        """
        if ttl_seconds is None:
            return WriteResult(key=key)
        applied = self._store.expire(key, ttl_seconds)
        if not applied:
            logger.warning("ttl_not_confirmed", key=key, ttl_seconds=ttl_seconds)
        return WriteResult(key=key, ttl_seconds=ttl_seconds, ttl_confirmed=applied)
