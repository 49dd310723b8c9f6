"""Stress harness: hammer one RecordStore from many threads.

Each worker runs a seeded mix of operations against a shared store:

    create  40%   new {"name", "email"} dict
    get     30%   random id in [1, last_id]
    update  20%   random id, email only
    delete  10%   random id

Random ids deliberately include deleted ones, so a realistic share of
get/update/delete come back NotFound. At the end the harness checks
the things a lost update would break: every create returned a
distinct id, last_id equals the number of creates, and the surviving
record count equals creates minus successful deletes.

Seeds are per worker (seed + worker index) so the operation sequence
each worker issues is reproducible; the interleaving is not.
"""
from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from recordstore_lite.domain.results import NotFound
from recordstore_lite.domain.types import RecordId
from recordstore_lite.store.memory_store import RecordStore

log = logging.getLogger(__name__)

OP_WEIGHTS: dict[str, int] = {"create": 40, "get": 30, "update": 20, "delete": 10}


@dataclass(slots=True)
class StressResult:
    """Outcome of a single stress run."""
    workers: int
    total_ops: int
    op_counts: dict[str, int]
    not_found: int
    elapsed_ms: float
    ops_per_sec: float
    final_count: int
    last_id: RecordId
    ids_unique: bool
    successful_deletes: int = 0
    created_ids: list[RecordId] = field(default_factory=list, repr=False)

    @property
    def consistent(self) -> bool:
        """True when no create or delete was lost."""
        creates = self.op_counts.get("create", 0)
        return (
            self.ids_unique
            and self.last_id == creates
            and self.final_count == creates - self.successful_deletes
        )


@dataclass(slots=True)
class _WorkerTally:
    op_counts: dict[str, int]
    not_found: int
    deletes_ok: int
    created: list[RecordId]


def run_stress(
    workers: int = 8,
    ops_per_worker: int = 5_000,
    seed: int = 42,
    store: RecordStore | None = None,
) -> StressResult:
    """Run the operation mix on `workers` threads and return the tallies.

    StressResult.consistent assumes `store` started empty.
    """
    if workers <= 0:
        raise ValueError("workers must be positive")
    if ops_per_worker < 0:
        raise ValueError("ops_per_worker must be >= 0")

    target: RecordStore = store if store is not None else RecordStore()
    kinds = list(OP_WEIGHTS)
    weights = [OP_WEIGHTS[k] for k in kinds]

    def _worker(worker_idx: int) -> _WorkerTally:
        rng = random.Random(seed + worker_idx)
        tally = _WorkerTally(
            op_counts={k: 0 for k in kinds}, not_found=0, deletes_ok=0, created=[],
        )
        # Kinds drawn up front: the randint ranges below depend on other threads.
        plan = rng.choices(kinds, weights, k=ops_per_worker)
        for i, kind in enumerate(plan):
            tally.op_counts[kind] += 1
            if kind == "create":
                tally.created.append(target.create({
                    "name": f"w{worker_idx}-{i}",
                    "email": f"w{worker_idx}-{i}@example.com",
                }))
                continue

            # last_id may be 0 early on; id 0 is never issued, so it
            # exercises the NotFound path.
            record_id = rng.randint(0, target.last_id)
            if kind == "get":
                result = target.get(record_id)
            elif kind == "update":
                result = target.update(record_id, {"email": f"u{i}@example.com"})
            else:
                result = target.delete(record_id)
                if not isinstance(result, NotFound):
                    tally.deletes_ok += 1
            if isinstance(result, NotFound):
                tally.not_found += 1
        return tally

    t0 = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        tallies = list(pool.map(_worker, range(workers)))
    elapsed_ms = (time.perf_counter() - t0) * 1000

    op_counts = {k: sum(t.op_counts[k] for t in tallies) for k in kinds}
    created = [rid for t in tallies for rid in t.created]
    total_ops = workers * ops_per_worker

    result = StressResult(
        workers=workers,
        total_ops=total_ops,
        op_counts=op_counts,
        not_found=sum(t.not_found for t in tallies),
        elapsed_ms=elapsed_ms,
        ops_per_sec=total_ops / (elapsed_ms / 1000) if elapsed_ms > 0 else 0.0,
        final_count=target.count(),
        last_id=target.last_id,
        ids_unique=len(set(created)) == len(created),
        successful_deletes=sum(t.deletes_ok for t in tallies),
        created_ids=created,
    )
    if not result.consistent:
        log.warning("stress run finished in an inconsistent state: %s", result)
    return result
