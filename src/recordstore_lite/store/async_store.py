"""Async record store: RecordStore semantics for coroutine callers.

Same dict + counter, guarded by an asyncio.Lock instead of a
threading.Lock. Acquiring the lock is the only await in each
operation; everything inside the critical section is synchronous.

That matters for cancellation. If a caller's task is cancelled while
it waits for the lock, it never entered the critical section and the
store is untouched. Once inside, there is no suspension point left,
so the operation runs to completion before anyone else gets a turn.
No half-applied update, no counter bump without its insert.

One instance belongs to one event loop. For callers on several
threads, use RecordStore.
"""
from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

from pydantic import BaseModel

from recordstore_lite.domain.results import NotFound, Ok
from recordstore_lite.domain.types import Patch, RecordId
from recordstore_lite.store.base import AsyncRecordStoreBase
from recordstore_lite.store.merge import apply_patch, patch_fields

log = logging.getLogger(__name__)

R = TypeVar("R")


class AsyncRecordStore(AsyncRecordStoreBase[R]):
    """Coroutine-safe in-memory CRUD store with auto-incrementing ids."""

    def __init__(self) -> None:
        self._records: dict[RecordId, R] = {}
        self._last_id: RecordId = 0
        self._lock = asyncio.Lock()

    async def list(self) -> list[tuple[RecordId, R]]:
        async with self._lock:
            return list(self._records.items())

    async def get(self, record_id: RecordId) -> R | NotFound:
        async with self._lock:
            if record_id in self._records:
                return self._records[record_id]
        log.debug("get: no record with id %s", record_id)
        return NotFound(record_id)

    async def create(self, record: R) -> RecordId:
        async with self._lock:
            self._last_id += 1
            record_id = self._last_id
            self._records[record_id] = record
        log.debug("created record %s", record_id)
        return record_id

    async def update(
        self, record_id: RecordId, patch: Patch | BaseModel
    ) -> Ok | NotFound:
        fields = patch_fields(patch)
        async with self._lock:
            missing = record_id not in self._records
            if not missing:
                self._records[record_id] = apply_patch(
                    self._records[record_id], fields
                )
        if missing:
            log.debug("update: no record with id %s", record_id)
            return NotFound(record_id)
        log.debug("updated record %s fields=%s", record_id, sorted(fields))
        return Ok(record_id)

    async def delete(self, record_id: RecordId) -> Ok | NotFound:
        async with self._lock:
            removed = self._records.pop(record_id, _MISSING) is not _MISSING
        if not removed:
            log.debug("delete: no record with id %s", record_id)
            return NotFound(record_id)
        log.debug("deleted record %s", record_id)
        return Ok(record_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._records)

    @property
    def last_id(self) -> RecordId:
        """Largest id issued so far (0 before the first create).

        A plain read: no await can interleave with it on the loop.
        """
        return self._last_id


_MISSING = object()
