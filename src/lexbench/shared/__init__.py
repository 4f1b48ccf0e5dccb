"""Shared modules: configuration, logging, errors, formatting."""

from .config import BenchConfig, GateThresholds
from .errors import BaselineFormatError, BenchmarkError, ScannerLoadError
from .logging import configure_logging

__all__ = [
	"BenchConfig",
	"GateThresholds",
	"configure_logging",
	"BenchmarkError",
	"BaselineFormatError",
	"ScannerLoadError",
]
