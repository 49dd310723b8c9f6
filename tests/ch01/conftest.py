"""Shared record types for chapter 1 merge/result tests."""
from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass(frozen=True, slots=True)
class Contact:
    name: str
    email: str
    tags: tuple[str, ...] = ()
    revision: int = field(default=0, init=False)


@pytest.fixture()
def contact() -> Contact:
    return Contact(name="A", email="a@x.com")
