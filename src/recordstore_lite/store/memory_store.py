"""In-memory record store: one dict, one counter, one lock.

Every operation takes the same threading.Lock for its whole (short)
critical section. That makes each call atomic with respect to every
other call on the same store, and in particular:

  - create() bumps the counter and inserts under the new id inside
    one critical section. Nobody can see a bumped counter without the
    record, or two creates handing out the same id.
  - update() reads, merges and writes back under the lock, so two
    concurrent partial updates can't lose each other's fields.
  - list() copies the items under the lock. The caller iterates a
    snapshot, never the live dict.

The lock is never held across I/O. The only work inside it is dict
access and, for update(), building the merged record.

Ids come from a counter that only ever goes up. Deleting a record does
not rewind it, so a deleted id is retired for the life of the store.
"""
from __future__ import annotations

import logging
import threading
from typing import TypeVar

from pydantic import BaseModel

from recordstore_lite.domain.results import NotFound, Ok
from recordstore_lite.domain.types import Patch, RecordId
from recordstore_lite.store.base import RecordStoreBase
from recordstore_lite.store.merge import apply_patch, patch_fields

log = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(RecordStoreBase[R]):
    """Thread-safe in-memory CRUD store with auto-incrementing ids.

    Share one instance between all callers. Callers never get at the
    dict or the counter directly.

    INVARIANT: every key in the map is <= last_id, and last_id is the
    largest id ever issued (deleted ones included).
    """

    __slots__ = ("_records", "_last_id", "_lock")

    def __init__(self) -> None:
        self._records: dict[RecordId, R] = {}
        self._last_id: RecordId = 0
        self._lock = threading.Lock()

    def list(self) -> list[tuple[RecordId, R]]:
        with self._lock:
            return list(self._records.items())

    def get(self, record_id: RecordId) -> R | NotFound:
        with self._lock:
            try:
                return self._records[record_id]
            except KeyError:
                pass
        log.debug("get: no record with id %s", record_id)
        return NotFound(record_id)

    def create(self, record: R) -> RecordId:
        with self._lock:
            self._last_id += 1
            record_id = self._last_id
            self._records[record_id] = record
        log.debug("created record %s", record_id)
        return record_id

    def update(
        self, record_id: RecordId, patch: Patch | BaseModel
    ) -> Ok | NotFound:
        """Merge the supplied fields of `patch` into the stored record.

        Raises ValueError/TypeError (store unchanged) if the patch
        doesn't fit the record type. A missing id is NotFound, not an
        exception.
        """
        fields = patch_fields(patch)
        with self._lock:
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

    def delete(self, record_id: RecordId) -> Ok | NotFound:
        with self._lock:
            try:
                del self._records[record_id]
            except KeyError:
                missing = True
            else:
                missing = False
        if missing:
            log.debug("delete: no record with id %s", record_id)
            return NotFound(record_id)
        log.debug("deleted record %s", record_id)
        return Ok(record_id)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def last_id(self) -> RecordId:
        """Largest id issued so far (0 before the first create)."""
        with self._lock:
            return self._last_id

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def __repr__(self) -> str:
        with self._lock:
            count, last_id = len(self._records), self._last_id
        return f"RecordStore(count={count}, last_id={last_id})"
