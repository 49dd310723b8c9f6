"""Contention tests for RecordStore.

Covers: concurrent create uniqueness (the classic increment race),
concurrent partial updates on one record, concurrent delete of the
same id, and readers taking snapshots while writers run.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, wait

from recordstore_lite.domain.results import NotFound, Ok
from recordstore_lite.store.memory_store import RecordStore


def test_concurrent_creates_yield_distinct_ids():
    """16 threads x 500 creates: 8000 distinct ids, 8000 entries, no gaps."""
    store = RecordStore()
    n_threads = 16
    n_per_thread = 500

    def creator(thread_id):
        return [store.create({"t": thread_id, "i": i}) for i in range(n_per_thread)]

    with ThreadPoolExecutor(max_workers=n_threads) as pool:
        futs = [pool.submit(creator, tid) for tid in range(n_threads)]
        wait(futs)

    all_ids = [rid for f in futs for rid in f.result()]
    total = n_threads * n_per_thread
    assert len(all_ids) == total
    assert len(set(all_ids)) == total
    assert sorted(all_ids) == list(range(1, total + 1))
    assert store.count() == total
    assert len(store.list()) == total
    assert store.last_id == total


def test_ids_increase_within_each_thread():
    store = RecordStore()

    def creator(_):
        return [store.create({}) for _ in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        per_thread = list(pool.map(creator, range(8)))

    for ids in per_thread:
        assert all(a < b for a, b in zip(ids, ids[1:]))


def test_concurrent_partial_updates_do_not_lose_fields():
    """Each thread owns one field of the same record; all writes survive."""
    store = RecordStore()
    n_fields = 16
    rid = store.create({f"f{i}": 0 for i in range(n_fields)})

    def bumper(field_idx):
        for v in range(1, 201):
            assert store.update(rid, {f"f{field_idx}": v}) == Ok(rid)

    with ThreadPoolExecutor(max_workers=n_fields) as pool:
        wait([pool.submit(bumper, i) for i in range(n_fields)])

    record = store.get(rid)
    assert record == {f"f{i}": 200 for i in range(n_fields)}


def test_concurrent_delete_same_id_exactly_one_wins():
    store = RecordStore()
    rid = store.create({"name": "A"})
    barrier = threading.Barrier(8)
    results = []
    results_lock = threading.Lock()

    def deleter():
        barrier.wait()
        r = store.delete(rid)
        with results_lock:
            results.append(r)

    threads = [threading.Thread(target=deleter) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10.0)

    assert results.count(Ok(rid)) == 1
    assert results.count(NotFound(rid)) == 7
    assert store.count() == 0


def test_readers_see_consistent_snapshots():
    """Every list() snapshot has ids <= last_id observed right after it."""
    store = RecordStore()
    n_writers, n_per_writer = 4, 2_000
    errors = []

    def writer():
        for i in range(n_per_writer):
            rid = store.create({"i": i})
            if i % 3 == 0:
                store.delete(rid)

    def reader():
        for _ in range(300):
            snap = store.list()
            last = store.last_id
            ids = [rid for rid, _ in snap]
            if ids and max(ids) > last:
                errors.append(f"id {max(ids)} above last_id {last}")
            if len(ids) != len(set(ids)):
                errors.append("duplicate id in snapshot")

    writers = [threading.Thread(target=writer) for _ in range(n_writers)]
    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in writers + readers:
        t.start()
    for t in writers + readers:
        t.join(timeout=30.0)

    assert not any(t.is_alive() for t in writers + readers)
    assert errors == []
    total = n_writers * n_per_writer
    assert store.last_id == total
    # every third create is deleted again
    assert store.count() == total - n_writers * len(range(0, n_per_writer, 3))
