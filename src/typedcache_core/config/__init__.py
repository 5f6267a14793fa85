"""Configuration for typed-cache."""

from typedcache_core.config.settings import Settings

__all__ = ["Settings"]
