"""Shared fixtures: a deterministic clock and a scripted heap probe."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator

import pytest


class StepClock:
    """Clock whose start/stop pairs are exactly ``durations`` apart.

    Calls alternate between start (0.0) and stop (the next duration, cycling
    when exhausted), so every measured interval is exact.
    """

    def __init__(self, durations: Iterable[float]) -> None:
        self._durations = list(durations)
        self._index = 0
        self._running = False

    def __call__(self) -> float:
        self._running = not self._running
        if self._running:
            return 0.0
        duration = self._durations[self._index % len(self._durations)]
        self._index += 1
        return duration


class ScriptedHeapProbe:
    """Heap probe returning preset sizes and recording collections."""

    def __init__(self, sizes: Iterable[int]) -> None:
        self._sizes = list(sizes)
        self.collections = 0
        self.calls: list[str] = []

    @contextmanager
    def tracking(self) -> Iterator[None]:
        self.calls.append("start")
        try:
            yield
        finally:
            self.calls.append("stop")

    def force_collect(self) -> None:
        self.collections += 1
        self.calls.append("collect")

    def heap_size(self) -> int:
        self.calls.append("size")
        return self._sizes.pop(0)


class NullScanner:
    """Scanner that returns one token per whitespace-separated word."""

    def __init__(self) -> None:
        self.calls = 0

    def scan(self, source: str):
        self.calls += 1
        return source.split(), []


@pytest.fixture
def step_clock():
    return StepClock


@pytest.fixture
def heap_probe():
    return ScriptedHeapProbe


@pytest.fixture
def null_scanner() -> NullScanner:
    return NullScanner()
