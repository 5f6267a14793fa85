"""Abstract store handle and value codec interfaces."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueCodec(Protocol):
    """Encoding of cached values to and from the store's text form."""

    def encode(self, value: Any) -> str:  # noqa: ANN401
        """Encode a value for storage."""
        ...

    def encode_member(self, value: Any) -> str:  # noqa: ANN401
        """Encode a set member; values equal in Python must encode identically."""
        ...

    def decode(self, raw: str) -> Any:  # noqa: ANN401
        """Decode a stored value. Raises TypeMismatchError on malformed input."""
        ...


@runtime_checkable
class StoreHandle(Protocol):
    """Raw primitives over one store connection.

    Every method is a single network round trip. Implementations raise
    StoreUnavailableError on transport failure and TypeMismatchError when
    the key holds a value of the wrong kind.
    """

    # --- Scalars ---

    def get(self, key: str) -> Any | None:  # noqa: ANN401
        """Return the decoded value at key, or None when absent."""
        ...

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        """Overwrite the value at key with no expiry."""
        ...

    def set_with_ttl(self, key: str, value: Any, ttl_seconds: int) -> None:  # noqa: ANN401
        """Write value and expiry in one atomic command."""
        ...

    def set_if_absent(
        self,
        key: str,
        value: Any,  # noqa: ANN401
        ttl_seconds: int | None = None,
    ) -> bool:
        """Atomically create key if missing. Returns True when written."""
        ...

    def get_many(self, keys: list[str]) -> list[Any | None]:
        """Return values aligned with keys; None marks an absent key."""
        ...

    def set_many(self, mapping: Mapping[str, Any]) -> None:
        """Write every pair in one batched command."""
        ...

    def increment(self, key: str, delta: int) -> int:
        """Atomically add delta to the integer at key, starting from zero."""
        ...

    # --- Key lifecycle ---

    def delete(self, key: str) -> bool:
        """Delete key. Returns True when a key was removed."""
        ...

    def delete_many(self, keys: Iterable[str]) -> int:
        """Delete all keys in one batched command. Returns the count removed."""
        ...

    def exists(self, key: str) -> bool:
        """Return True when key is present."""
        ...

    def expire(self, key: str, ttl_seconds: int) -> bool:
        """Set a TTL on key. Returns False when key does not exist."""
        ...

    def ttl_remaining(self, key: str) -> int:
        """Return the store's raw TTL: -2 when absent, -1 when persistent."""
        ...

    def scan_keys(self, pattern: str) -> set[str]:
        """Return every key matching a glob pattern."""
        ...

    # --- Lists ---

    def push_head(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """Push values onto the head of the list. Returns the new length."""
        ...

    def pop_tail(self, key: str) -> Any | None:  # noqa: ANN401
        """Pop from the tail of the list, or None when empty."""
        ...

    def list_range(self, key: str, start: int, end: int) -> list[Any]:
        """Return list items between start and end, both inclusive."""
        ...

    # --- Sets ---

    def add_members(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """Add members to the set. Returns how many were new."""
        ...

    def remove_members(self, key: str, *values: Any) -> int:  # noqa: ANN401
        """Remove members from the set. Returns how many were removed."""
        ...

    def members(self, key: str) -> list[Any]:
        """Return all set members in no particular order."""
        ...

    # --- Hashes ---

    def put_fields(self, key: str, mapping: Mapping[str, Any]) -> int:
        """Write all fields of the hash in one command."""
        ...

    def fields(self, key: str) -> dict[str, Any]:
        """Return all fields of the hash; empty when absent."""
        ...

    # --- Connection ---

    def ping(self) -> bool:
        """Return True when the store answers."""
        ...

    def close(self) -> None:
        """Release the connection pool."""
        ...
