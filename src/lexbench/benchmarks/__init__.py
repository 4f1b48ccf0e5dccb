"""Benchmark harness.

This package provides:
- a runner with warmup and measurement phases and statistical results,
- single-shot heap-delta measurement,
- baseline persistence and comparison,
- synthetic scanner inputs,
- a throughput gate for automated checks.
"""

from .baseline import ChangeVerdict, Comparison, classify_change, compare_results, read_results, write_results
from .gate import GateOutcome, GateStatus, RegressionGate, classify_throughput
from .memory import HeapProbe, MemoryProfile, TracemallocHeapProbe, measure_memory
from .results import Result
from .runner import BenchmarkReport, Runner, write_report
from .synthetic import generate_javascript, generate_json

__all__ = [
    "BenchmarkReport",
    "ChangeVerdict",
    "Comparison",
    "GateOutcome",
    "GateStatus",
    "HeapProbe",
    "MemoryProfile",
    "RegressionGate",
    "Result",
    "Runner",
    "TracemallocHeapProbe",
    "classify_change",
    "classify_throughput",
    "compare_results",
    "generate_javascript",
    "generate_json",
    "measure_memory",
    "read_results",
    "write_report",
    "write_results",
]
