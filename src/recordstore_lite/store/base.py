"""Abstract bases for record stores.

Two contracts with the same five operations:
  - RecordStoreBase: plain methods, for threaded callers.
  - AsyncRecordStoreBase: coroutines, for callers on an event loop.

Anything that implements one of these can be swapped in without
touching calling code. The in-memory stores are the reference
implementations; a durable backend would implement the same contract,
including the merge-only-supplied-fields rule for update().
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from recordstore_lite.domain.results import NotFound, Ok
from recordstore_lite.domain.types import Patch, RecordId

R = TypeVar("R")


class RecordStoreBase(ABC, Generic[R]):
    """Interface for stores called from ordinary (possibly threaded) code."""

    @abstractmethod
    def list(self) -> list[tuple[RecordId, R]]:
        """Snapshot of every (id, record). Order is unspecified."""
        ...

    @abstractmethod
    def get(self, record_id: RecordId) -> R | NotFound:
        """The record under record_id, or NotFound(record_id)."""
        ...

    @abstractmethod
    def create(self, record: R) -> RecordId:
        """Store record under a fresh id and return the id."""
        ...

    @abstractmethod
    def update(
        self, record_id: RecordId, patch: Patch | BaseModel
    ) -> Ok | NotFound:
        """Overwrite only the supplied fields of the stored record."""
        ...

    @abstractmethod
    def delete(self, record_id: RecordId) -> Ok | NotFound:
        """Remove the record. The id is never issued again."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of records currently stored."""
        ...


class AsyncRecordStoreBase(ABC, Generic[R]):
    """Coroutine flavour of RecordStoreBase."""

    @abstractmethod
    async def list(self) -> list[tuple[RecordId, R]]:
        ...

    @abstractmethod
    async def get(self, record_id: RecordId) -> R | NotFound:
        ...

    @abstractmethod
    async def create(self, record: R) -> RecordId:
        ...

    @abstractmethod
    async def update(
        self, record_id: RecordId, patch: Patch | BaseModel
    ) -> Ok | NotFound:
        ...

    @abstractmethod
    async def delete(self, record_id: RecordId) -> Ok | NotFound:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
