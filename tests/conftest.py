"""Root conftest — shared test configuration and a fresh store per test."""

import os
from datetime import datetime

import pytest

# Settings are cached on first use; pin test values before the app is imported
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")

from cooploan.infrastructure.memory_store import InMemoryStore  # noqa: E402
from tests.factories import FIXED_NOW  # noqa: E402


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh, empty entity store."""
    return InMemoryStore()


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW
