"""Exceptions raised by the benchmark harness."""

from __future__ import annotations


class BenchmarkError(RuntimeError):
    """Base error for benchmark harness failures."""


class BaselineFormatError(BenchmarkError, ValueError):
    """A baseline file exists but does not hold a list of results."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"malformed baseline {path}: {reason}")
        self.path = path
        self.reason = reason


class ScannerLoadError(BenchmarkError):
    """A scanner import path could not be resolved."""
