"""Typed outcomes for store operations.

get/update/delete hand back a value instead of raising when the id is
missing. The caller decides what a miss means at its own boundary:

    result = store.get(7)
    if isinstance(result, NotFound):
        return result.details("User")   # {"id": 7, "message": ...}

Ok is truthy and NotFound is falsy, so `if store.delete(k):` reads the
way you'd expect. Callers that prefer exceptions call .unwrap().
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NoReturn, TypeAlias, TypeVar

from recordstore_lite.domain.types import RecordId

R = TypeVar("R")


class RecordNotFoundError(KeyError):
    """Raised by NotFound.unwrap(). Carries the missing id."""

    def __init__(self, record_id: RecordId) -> None:
        self.record_id = record_id
        super().__init__(record_id)

    def __str__(self) -> str:
        return f"Record with id {self.record_id} not found"


@dataclass(frozen=True, slots=True)
class Ok:
    """Successful update or delete. Carries the id it applied to."""
    id: RecordId

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> RecordId:
        return self.id


@dataclass(frozen=True, slots=True)
class NotFound:
    """No record exists under `id` at the time of the operation."""
    id: RecordId

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise RecordNotFoundError(self.id)

    def details(self, kind: str = "Record") -> dict[str, Any]:
        """Payload an outer layer can use for its not-found response."""
        return {"id": self.id, "message": f"{kind} with id {self.id} not found"}


Result: TypeAlias = Ok | NotFound


def unwrap(result: R | NotFound) -> R:
    """Return the value of a get() result or raise RecordNotFoundError."""
    if isinstance(result, NotFound):
        result.unwrap()
    return result  # type: ignore[return-value]
