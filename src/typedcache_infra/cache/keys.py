"""Cache key builders.

Key components must not contain the separator, otherwise distinct
component tuples could collide on the same key.
"""

from __future__ import annotations

from typedcache_core.constants import DEFAULT_KEY_SEPARATOR

_GLOB_CHARS = frozenset("*?[]")


def _validate_key_component(value: str, sep: str) -> None:
    """Raise ValueError if a component is empty or contains the separator.

    Args:
        value: String component used in a cache key.
        sep: Separator the key is built with.

    Raises:
        ValueError: If value is empty or contains sep.
    """
    if not value:
        msg = "Cache key components must not be empty"
        raise ValueError(msg)
    if sep in value:
        msg = f"Cache key component {value!r} must not contain separator {sep!r}"
        raise ValueError(msg)


def build_key(*parts: object, sep: str = DEFAULT_KEY_SEPARATOR) -> str:
    """Join components into a key, e.g. ``build_key("session", 42) -> "session:42"``."""
    if not parts:
        msg = "build_key needs at least one component"
        raise ValueError(msg)
    components = [str(part) for part in parts]
    for component in components:
        _validate_key_component(component, sep)
    return sep.join(components)


def build_pattern(*parts: object, sep: str = DEFAULT_KEY_SEPARATOR) -> str:
    """Build a glob pattern matching every key under the given prefix.

    ``build_pattern("session")`` gives ``"session:*"``. Glob characters in
    the components are rejected so a prefix cannot widen the match.
    """
    prefix = build_key(*parts, sep=sep)
    if _GLOB_CHARS.intersection(prefix):
        msg = f"Pattern prefix {prefix!r} must not contain glob characters"
        raise ValueError(msg)
    return f"{prefix}{sep}*"
