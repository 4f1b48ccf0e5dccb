"""Heap-delta measurement around a single workload execution.

The measurement is deliberately single-shot: repeating allocate/collect
cycles would mostly measure the profiler and the collector, not the workload.
"""

from __future__ import annotations

import gc
import time
import tracemalloc
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterator, NamedTuple, Protocol

Workload = Callable[[], object]


class HeapProbe(Protocol):
    """Access to the runtime's collector and heap statistics."""

    def tracking(self) -> ContextManager[None]:
        """Keeps heap accounting active for the duration of the block."""

    def force_collect(self) -> None:
        """Runs a full garbage collection."""

    def heap_size(self) -> int:
        """Returns the current heap size in bytes."""


@dataclass(slots=True)
class TracemallocHeapProbe:
    """Heap probe backed by :mod:`gc` and :mod:`tracemalloc`.

    Tracing is only active inside :meth:`tracking`. If it was already running
    when the block was entered it is left running on exit; otherwise it is
    stopped again so later timed benchmarks do not pay for allocation hooks.
    """

    @contextmanager
    def tracking(self) -> Iterator[None]:
        started_here = not tracemalloc.is_tracing()
        if started_here:
            tracemalloc.start()
        try:
            yield
        finally:
            if started_here:
                tracemalloc.stop()

    def force_collect(self) -> None:
        gc.collect()

    def heap_size(self) -> int:
        current, _peak = tracemalloc.get_traced_memory()
        return int(current)


class MemoryProfile(NamedTuple):
    elapsed: float
    memory_used: int
    final_heap_size: int


def measure_memory(
    workload: Workload,
    *,
    probe: HeapProbe | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> MemoryProfile:
    probe = probe or TracemallocHeapProbe()

    with probe.tracking():
        probe.force_collect()
        initial = probe.heap_size()

        start = clock()
        workload()
        elapsed = clock() - start

        probe.force_collect()
        final = probe.heap_size()

    return MemoryProfile(elapsed=elapsed, memory_used=final - initial, final_heap_size=final)


def bytes_per_token(memory_used: int, token_count: int) -> float:
    return memory_used / token_count if token_count > 0 else 0.0


def overhead_ratio(memory_used: int, input_size: int) -> float:
    return memory_used / input_size if input_size > 0 else 0.0


def tokens_per_mib(memory_used: int, token_count: int) -> float:
    if memory_used <= 0:
        return 0.0
    return token_count / (memory_used / 1_048_576)


def rate_memory_efficiency(per_token: float) -> str:
    if per_token < 100:
        return "excellent"
    if per_token < 500:
        return "good"
    return "high"


def rate_memory_scaling(per_mib: float) -> str:
    if per_mib >= 10_000:
        return "excellent"
    if per_mib >= 5_000:
        return "good"
    if per_mib >= 1_000:
        return "acceptable"
    return "needs-optimization"
