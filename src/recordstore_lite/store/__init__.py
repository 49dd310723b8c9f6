"""Record stores: threaded and async, same five operations.

RecordStore is the one to share between threads; AsyncRecordStore is
for callers on a single event loop. Both sit behind the contracts in
store.base so a different backend can be dropped in.
"""
from recordstore_lite.store.async_store import AsyncRecordStore
from recordstore_lite.store.base import AsyncRecordStoreBase, RecordStoreBase
from recordstore_lite.store.memory_store import RecordStore
from recordstore_lite.store.merge import apply_patch, patch_fields

__all__ = [
    "AsyncRecordStore",
    "AsyncRecordStoreBase",
    "RecordStore",
    "RecordStoreBase",
    "apply_patch",
    "patch_fields",
]
