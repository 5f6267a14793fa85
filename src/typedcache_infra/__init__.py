"""Typed cache infrastructure: Redis store handle and cache operations."""
