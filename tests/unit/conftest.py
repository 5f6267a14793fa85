"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tests.mocks.mock_settings import make_settings
from tests.mocks.mock_store import FakeClock, InMemoryStore
from typedcache_infra.cache.client import CacheClient


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def clock() -> FakeClock:
    """Return a manually advanced clock starting at zero."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryStore:
    """Return an empty in-memory store handle driven by the fake clock."""
    return InMemoryStore(clock)


@pytest.fixture
def cache(store: InMemoryStore) -> CacheClient:
    """Return a CacheClient over the in-memory store."""
    return CacheClient(store)


@pytest.fixture
def mock_store() -> MagicMock:
    """Return a MagicMock store handle for call-sequence assertions."""
    mock = MagicMock()
    mock.expire.return_value = True
    mock.exists.return_value = True
    mock.delete.return_value = True
    return mock
