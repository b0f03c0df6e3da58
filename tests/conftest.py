"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest
from pathlib import Path
from typing import Iterator

from ttlstore import api
from ttlstore.store.file_store import FileStore


class FakeClock:
    """
    Controllable time source for TTL testing.

    Usage:
        clock = FakeClock()
        store = FileStore(path, clock=clock)
        clock.advance_minutes(6)
    """

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def advance_minutes(self, minutes: float) -> None:
        self.advance(minutes * 60)


# ============================================================================
# FileStore Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a backing file that does not exist yet."""
    return tmp_path / ".env"


@pytest.fixture
def store(store_path: Path, clock: FakeClock) -> FileStore:
    """Create a FileStore on a fresh file, driven by the fake clock."""
    return FileStore(store_path, clock=clock)


@pytest.fixture
def reopen(store_path: Path, clock: FakeClock):
    """
    Factory fixture opening another FileStore on the same file.

    Usage:
        def test_something(store, reopen):
            store.add("key", "value")
            assert reopen().get("key") == "value"
    """
    def factory() -> FileStore:
        return FileStore(store_path, clock=clock)
    return factory


# ============================================================================
# Default-Instance Fixtures
# ============================================================================

@pytest.fixture
def default_store(store: FileStore) -> Iterator[FileStore]:
    """Install the test store as the api module's default store."""
    api.set_default_store(store)
    yield store
    api.reset_default_store()
