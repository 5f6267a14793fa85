"""Store handle implementations."""

from typedcache_infra.store.codec import JsonCodec
from typedcache_infra.store.redis_store import RedisStore

__all__ = [
    "JsonCodec",
    "RedisStore",
]
