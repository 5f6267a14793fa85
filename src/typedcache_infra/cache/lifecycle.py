"""Key-lifecycle operations: existence, deletion, expiry, atomic create."""

from __future__ import annotations

from typing import Any

import structlog

from typedcache_core.constants import TTL_KEY_MISSING, TTL_NO_EXPIRY
from typedcache_core.exceptions import PartialBatchError, StoreUnavailableError
from typedcache_core.models.results import KeyTTL, TTLState, WriteResult
from typedcache_infra.cache.base import TTL, StoreBound, normalize_ttl, require_ttl

logger = structlog.get_logger()


class KeyLifecycleOperations(StoreBound):
    """Existence checks, deletes, and TTL queries on any key."""

    def exists(self, key: str) -> bool:
        """Return True when key is present."""
        return self._store.exists(key)

    def delete(self, key: str) -> bool:
        """Delete key if it exists. Returns True when something was removed.

        The existence check and the delete are two round trips. A concurrent
        delete in between makes the second call a no-op, not an error.
        """
        if not self._store.exists(key):
            logger.debug("delete_skipped_absent", key=key)
            return False
        return self._store.delete(key)

    def delete_all(self, *keys: str) -> int:
        """Delete keys one at a time. Returns how many were removed.

        There is no rollback: if the store drops out partway, a
        PartialBatchError lists the keys already processed.
        """
        completed: list[str] = []
        removed = 0
        for key in keys:
            try:
                removed += int(self.delete(key))
            except StoreUnavailableError as e:
                msg = f"delete_all processed {len(completed)} of {len(keys)} keys before failing"
                raise PartialBatchError(msg, completed=completed, failed_key=key) from e
            completed.append(key)
        return removed

    def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern in one batched call.

        Keys are collected with SCAN first; keys created after the scan
        finishes are not part of this pass.
        """
        keys = self._store.scan_keys(pattern)
        if not keys:
            return 0
        deleted = self._store.delete_many(keys)
        logger.info("pattern_deleted", pattern=pattern, matched=len(keys), deleted=deleted)
        return deleted

    def remaining_ttl(self, key: str) -> KeyTTL:
        """Return the key's remaining TTL, telling absent and persistent keys apart."""
        raw = self._store.ttl_remaining(key)
        if raw == TTL_KEY_MISSING:
            return KeyTTL(state=TTLState.ABSENT)
        if raw == TTL_NO_EXPIRY:
            return KeyTTL(state=TTLState.PERSISTENT)
        return KeyTTL(state=TTLState.EXPIRING, seconds=raw)

    def expire(self, key: str, ttl_seconds: TTL) -> bool:
        """Assign a TTL to an existing key. Returns False when the key is absent."""
        ttl = require_ttl(ttl_seconds)
        return self._store.expire(key, ttl)

    def set_if_absent(self, key: str, value: Any, ttl_seconds: TTL | None = None) -> bool:  # noqa: ANN401
        """Atomically create key when missing. Returns True when written."""
        return self._store.set_if_absent(key, value, normalize_ttl(ttl_seconds))

    def set_with_expiry(self, key: str, value: Any, ttl_seconds: TTL) -> WriteResult:  # noqa: ANN401
        """Write value and TTL in one atomic command."""
        ttl = require_ttl(ttl_seconds)
        self._store.set_with_ttl(key, value, ttl)
        return WriteResult(key=key, ttl_seconds=ttl)
