"""Custom exception hierarchy for typed-cache."""

from __future__ import annotations


class TypedCacheError(Exception):
    """Base exception for all typed-cache errors."""


class StoreUnavailableError(TypedCacheError):
    """Raised when the backing store cannot be reached or times out."""


class PartialBatchError(StoreUnavailableError):
    """Raised when a sequential batch aborts partway through.

    Work already done on ``completed`` keys is not rolled back.
    """

    def __init__(self, message: str, *, completed: list[str], failed_key: str) -> None:
        super().__init__(message)
        self.completed = completed
        self.failed_key = failed_key


class TypeMismatchError(TypedCacheError):
    """Raised when a stored value cannot be read as the requested type."""


class StoreCommandError(TypedCacheError):
    """Raised when the store rejects a command for any other reason."""
