"""Stress harness and reporting for recordstore-lite."""

from recordstore_lite.profiling.harness import OP_WEIGHTS, StressResult, run_stress
from recordstore_lite.profiling.report import format_report

__all__ = [
    "OP_WEIGHTS",
    "StressResult",
    "format_report",
    "run_stress",
]
