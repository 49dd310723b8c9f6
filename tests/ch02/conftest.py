"""Shared fixtures for chapter 2 RecordStore tests."""
from __future__ import annotations

import pytest

from recordstore_lite.store.memory_store import RecordStore


@pytest.fixture()
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture()
def jdoe() -> dict[str, str]:
    return {"name": "jdoe", "email": "j@x.com"}
