"""Result models for typed-cache operations."""

from typedcache_core.models.results import IncrementResult, KeyTTL, TTLState, WriteResult

__all__ = [
    "IncrementResult",
    "KeyTTL",
    "TTLState",
    "WriteResult",
]
