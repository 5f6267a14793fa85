"""Public interface re-exports for typedcache_core."""

from typedcache_core.interfaces.store import StoreHandle, ValueCodec

__all__ = [
    "StoreHandle",
    "ValueCodec",
]
