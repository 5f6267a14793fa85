"""Redis-backed implementation of StoreHandle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import structlog
from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError, ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from typedcache_core.constants import DEFAULT_SCAN_COUNT, TYPE_ERROR_MARKERS
from typedcache_core.exceptions import (
    StoreCommandError,
    StoreUnavailableError,
    TypeMismatchError,
)
from typedcache_core.interfaces.store import ValueCodec
from typedcache_infra.store.codec import JsonCodec

logger = structlog.get_logger()


@contextmanager
def _translate_errors(operation: str, key: str | None = None) -> Iterator[None]:
    """Map redis-py exceptions onto the typed-cache hierarchy."""
    try:
        yield
    except (RedisConnectionError, RedisTimeoutError) as e:
        logger.warning("store_unavailable", operation=operation, key=key, error=str(e))
        msg = f"Store unavailable during {operation}: {e}"
        raise StoreUnavailableError(msg) from e
    except ResponseError as e:
        if any(marker in str(e) for marker in TYPE_ERROR_MARKERS):
            msg = f"{operation} on {key!r} hit a value of the wrong type: {e}"
            raise TypeMismatchError(msg) from e
        msg = f"Store rejected {operation}: {e}"
        raise StoreCommandError(msg) from e
    except RedisError as e:
        msg = f"Store error during {operation}: {e}"
        raise StoreCommandError(msg) from e


class RedisStore:
    """Store handle over a synchronous redis-py client.

    The client must be created with ``decode_responses=True``. One instance is
    safe to share across threads; redis-py pools the connections.
    """

    def __init__(
        self,
        redis: Redis,  # type: ignore[type-arg]
        codec: ValueCodec | None = None,
        scan_count: int = DEFAULT_SCAN_COUNT,
    ) -> None:
        """Initialize with a redis-py client and an optional codec."""
        self._redis = redis
        self._codec: ValueCodec = codec or JsonCodec()
        self._scan_count = scan_count

    def _decode(self, raw: Any) -> Any | None:  # noqa: ANN401
        """Decode a raw reply, passing None through as absent."""
        if raw is None:
            return None
        return self._codec.decode(raw)

    # --- Scalars ---

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        """Return the decoded value at key, or None when absent."""
        with _translate_errors("get", key):
            raw = self._redis.get(key)
        return self._decode(raw)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Overwrite the value at key with no expiry."""
        encoded = self._codec.encode(value)
        with _translate_errors("set", key):
            self._redis.set(key, encoded)

    def set_with_ttl(self, key: str, value: Any, ttl_seconds: int) -> None:  # noqa: ANN401
        """Write value and expiry in one SET EX command."""
        encoded = self._codec.encode(value)
        with _translate_errors("set_with_ttl", key):
            self._redis.set(key, encoded, ex=ttl_seconds)

    def set_if_absent(
        self,
        key: str,
        value: Any,  # noqa: ANN401
        ttl_seconds: int | None = None,
    ) -> bool:
        """Atomically create key with SET NX, adding EX when a TTL is given."""
        encoded = self._codec.encode(value)
        with _translate_errors("set_if_absent", key):
            written = self._redis.set(key, encoded, nx=True, ex=ttl_seconds)
        return bool(written)

    def get_many(self, keys: list[str]) -> list[Any | None]:
        """Return values aligned with keys via MGET."""
        if not keys:
            return []
        with _translate_errors("get_many"):
            raws = self._redis.mget(keys)
        return [self._decode(raw) for raw in raws]

    def set_many(self, mapping: Mapping[str, Any]) -> None:
        """Write every pair in one MSET."""
        encoded = {key: self._codec.encode(value) for key, value in mapping.items()}
        if not encoded:
            return
        with _translate_errors("set_many"):
            self._redis.mset(encoded)

    def increment(self, key: str, delta: int) -> int:
        """Atomically add delta with INCRBY."""
        with _translate_errors("increment", key):
            return int(self._redis.incrby(key, delta))

    # --- Key lifecycle ---

    def delete(self, key: str) -> bool:
        """Delete key. Returns True when a key was removed."""
        with _translate_errors("delete", key):
            return bool(self._redis.delete(key))

    def delete_many(self, keys: Iterable[str]) -> int:
        """Delete all keys in one DEL."""
        batch = list(keys)
        if not batch:
            return 0
        with _translate_errors("delete_many"):
            return int(self._redis.delete(*batch))

    def exists(self, key: str) -> bool:
        """Return True when key is present."""
        with _translate_errors("exists", key):
            return bool(self._redis.exists(key))

    def expire(self, key: str, ttl_seconds: int) -> bool:
        """Set a TTL on key. Returns False when key does not exist."""
        with _translate_errors("expire", key):
            return bool(self._redis.expire(key, ttl_seconds))

    def ttl_remaining(self, key: str) -> int:
        """Return the raw TTL reply: -2 when absent, -1 when persistent."""
        with _translate_errors("ttl_remaining", key):
            return int(self._redis.ttl(key))

    def scan_keys(self, pattern: str) -> set[str]:
        """Collect every key matching pattern with cursor-based SCAN."""
        with _translate_errors("scan_keys"):
            return set(self._redis.scan_iter(match=pattern, count=self._scan_count))

    # --- Lists ---

    def push_head(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """LPUSH values in order, so the last value ends up at the head."""
        encoded = [self._codec.encode(value) for value in values]
        with _translate_errors("push_head", key):
            return int(self._redis.lpush(key, *encoded))

    def pop_tail(self, key: str) -> Any | None:  # noqa: ANN401
        """RPOP one item, or None when the list is empty."""
        with _translate_errors("pop_tail", key):
            raw = self._redis.rpop(key)
        return self._decode(raw)

    def list_range(self, key: str, start: int, end: int) -> list[Any]:
        """LRANGE with both ends inclusive."""
        with _translate_errors("list_range", key):
            raws = self._redis.lrange(key, start, end)
        return [self._codec.decode(raw) for raw in raws]

    # --- Sets ---

    def add_members(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """SADD encoded members."""
        encoded = [self._codec.encode_member(value) for value in values]
        with _translate_errors("add_members", key):
            return int(self._redis.sadd(key, *encoded))

    def remove_members(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """SREM encoded members."""
        encoded = [self._codec.encode_member(value) for value in values]
        with _translate_errors("remove_members", key):
            return int(self._redis.srem(key, *encoded))

    def members(self, key: str) -> list[Any]:
        """SMEMBERS, decoded."""
        with _translate_errors("members", key):
            raws = self._redis.smembers(key)
        return [self._codec.decode(raw) for raw in raws]

    # --- Hashes ---

    def put_fields(self, key: str, mapping: Mapping[str, Any]) -> int:
        """HSET all fields in one command."""
        encoded = {field: self._codec.encode(value) for field, value in mapping.items()}
        with _translate_errors("put_fields", key):
            return int(self._redis.hset(key, mapping=encoded))

    def fields(self, key: str) -> dict[str, Any]:
        """HGETALL, decoded."""
        with _translate_errors("fields", key):
            raws = self._redis.hgetall(key)
        return {field: self._codec.decode(raw) for field, raw in raws.items()}

    # --- Connection ---

    def ping(self) -> bool:
        """Return True when the store answers PING."""
        with _translate_errors("ping"):
            return bool(self._redis.ping())

    def close(self) -> None:
        """Close the client and its connection pool."""
        self._redis.close()
