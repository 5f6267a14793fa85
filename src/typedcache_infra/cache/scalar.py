"""Scalar value operations: get/set, batch get/set, increment."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

import structlog

from typedcache_core.exceptions import PartialBatchError, StoreUnavailableError
from typedcache_core.models.results import IncrementResult, WriteResult
from typedcache_infra.cache.base import TTL, StoreBound, coerce, normalize_ttl

logger = structlog.get_logger()

T = TypeVar("T")


class ScalarOperations(StoreBound):
    """Typed get/set of single values."""

    def get_value(self, key: str, as_type: type[T] | None = None) -> T | Any | None:  # noqa: ANN401
        """Return the value at key, or None when absent."""
        return coerce(self._store.get(key), as_type, key)

    def set_value(self, key: str, value: Any, ttl_seconds: TTL | None = None) -> WriteResult:  # noqa: ANN401
        """Overwrite the value at key.

        With a TTL this uses the store's combined write+expire command, so the
        value never exists without its expiry.
        """
        ttl = normalize_ttl(ttl_seconds)
        if ttl is None:
            self._store.set(key, value)
        else:
            self._store.set_with_ttl(key, value, ttl)
        logger.debug("value_set", key=key, ttl_seconds=ttl)
        return WriteResult(key=key, ttl_seconds=ttl)

    def increment_value(
        self,
        key: str,
        delta: int = 1,
        ttl_seconds: TTL | None = None,
    ) -> IncrementResult:
        """Atomically add delta to the integer at key, then apply a TTL.

        A missing key counts as zero, so the first call yields ``delta``. The
        increment is atomic but the TTL is a second round trip: a reader in
        between sees the new value without its expiry.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            msg = f"delta must be an int, got {type(delta).__name__}"
            raise TypeError(msg)
        ttl = normalize_ttl(ttl_seconds)
        value = self._store.increment(key, delta)
        ttl_result = self._apply_ttl(key, ttl)
        return IncrementResult(
            key=key,
            value=value,
            ttl_seconds=ttl,
            ttl_confirmed=ttl_result.ttl_confirmed,
        )

    def multi_set(
        self,
        mapping: Mapping[str, Any],
        ttl_seconds: TTL | None = None,
    ) -> list[WriteResult]:
        """Write all pairs in one batch, then expire each key in turn.

        Not all-or-nothing. The batch write is atomic, but expiries are
        applied one key at a time; if the store drops out partway a
        PartialBatchError lists the keys already handled and the rest keep
        no expiry.
        """
        ttl = normalize_ttl(ttl_seconds)
        if not mapping:
            return []
        self._store.set_many(mapping)
        if ttl is None:
            return [WriteResult(key=key) for key in mapping]

        results: list[WriteResult] = []
        for key in mapping:
            try:
                results.append(self._apply_ttl(key, ttl))
            except StoreUnavailableError as e:
                completed = [r.key for r in results]
                msg = f"multi_set expired {len(completed)} of {len(mapping)} keys before failing"
                raise PartialBatchError(msg, completed=completed, failed_key=key) from e
        logger.debug("multi_set", count=len(results), ttl_seconds=ttl)
        return results

    def multi_get(
        self,
        keys: Sequence[str],
        as_type: type[T] | None = None,
    ) -> list[T | Any | None]:
        """Return values positionally aligned with keys; None marks absent keys."""
        keys = list(keys)
        values = self._store.get_many(keys)
        return [coerce(value, as_type, key) for key, value in zip(keys, values, strict=True)]
