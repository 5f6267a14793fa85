"""Shared constants for typed-cache."""

from __future__ import annotations

# Separator between key components, e.g. "session:42:profile"
DEFAULT_KEY_SEPARATOR = ":"

# Sentinels returned by the store's TTL command
TTL_KEY_MISSING = -2
TTL_NO_EXPIRY = -1

# SCAN COUNT hint used for pattern scans
DEFAULT_SCAN_COUNT = 500

# Fragments of store error replies that mean "wrong kind of value at key"
TYPE_ERROR_MARKERS: tuple[str, ...] = (
    "WRONGTYPE",
    "value is not an integer or out of range",
)
