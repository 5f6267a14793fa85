"""Cache operation groups and the composed CacheClient."""

from typedcache_infra.cache.client import CacheClient
from typedcache_infra.cache.keys import build_key, build_pattern

__all__ = [
    "CacheClient",
    "build_key",
    "build_pattern",
]
