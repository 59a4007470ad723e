"""Shared fixtures for the store editor tests."""

import pytest

from src.storeeditor.session import EditorSession
from src.storeeditor.store import MemoryStore, SqliteStore


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteStore(tmp_path / "store.db")


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path):
    """Runs a test once per store adapter."""
    if request.param == "memory":
        return MemoryStore()
    return SqliteStore(tmp_path / "store.db")


@pytest.fixture
def make_session(any_store):
    def _make(**initial):
        for key, raw in initial.items():
            any_store.set(key, raw)
        return EditorSession(any_store)
    return _make
