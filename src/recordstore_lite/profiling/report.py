"""Report generation for stress results."""
from __future__ import annotations

from recordstore_lite.profiling.harness import StressResult


def format_report(result: StressResult, label: str = "Stress run") -> str:
    """Format a StressResult as a readable report string."""
    total = result.total_ops or 1
    lines = [
        f"=== {label} ===",
        f"Workers:           {result.workers}",
        f"Operations:        {result.total_ops:,}",
        f"Total time:        {result.elapsed_ms:.1f} ms",
        f"Throughput:        {result.ops_per_sec:,.0f} ops/sec",
        "",
        "Operation mix:",
    ]
    for kind, n in result.op_counts.items():
        lines.append(f"  {kind + ':':<16} {n:>8,} ({n / total * 100:.1f}%)")
    lines += [
        f"  {'not found:':<16} {result.not_found:>8,}",
        "",
        f"Records left:      {result.final_count:,}",
        f"Last id issued:    {result.last_id:,}",
        f"Ids unique:        {'yes' if result.ids_unique else 'NO'}",
        f"Consistent:        {'yes' if result.consistent else 'NO'}",
    ]
    return "\n".join(lines)
