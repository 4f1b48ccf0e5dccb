"""Harness configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_REGRESSION_BAND = 5.0
DEFAULT_FAIL_BELOW = 5_000.0
DEFAULT_WARN_BELOW = 10_000.0


@dataclass(frozen=True, slots=True)
class GateThresholds:
    """Tokens-per-second limits used by the regression gate."""

    fail_below: float = DEFAULT_FAIL_BELOW
    warn_below: float = DEFAULT_WARN_BELOW

    def __post_init__(self) -> None:
        if self.fail_below > self.warn_below:
            raise ValueError("fail_below must not exceed warn_below")


@dataclass(frozen=True, slots=True)
class IterationPreset:
    warmup_iterations: int
    benchmark_iterations: int


SUITE_PRESETS: dict[str, IterationPreset] = {
    "quick": IterationPreset(2, 5),
    "ci": IterationPreset(1, 5),
    "memory": IterationPreset(2, 5),
    "full": IterationPreset(3, 30),
    "lexer": IterationPreset(2, 10),
}


@dataclass(slots=True)
class BenchConfig:
    """General configuration of a benchmark run."""

    warmup_iterations: int = 3
    benchmark_iterations: int = 30
    results_dir: Path = field(default_factory=lambda: Path("results"))
    regression_band: float = DEFAULT_REGRESSION_BAND
    thresholds: GateThresholds = field(default_factory=GateThresholds)

    @classmethod
    def default(cls) -> "BenchConfig":
        """Creates the default configuration."""

        return cls()

    @classmethod
    def for_suite(cls, suite: str) -> "BenchConfig":
        """Default configuration with the iteration preset of ``suite``."""

        config = cls.from_env()
        preset = SUITE_PRESETS.get(suite)
        if preset is None:
            return config
        env_warmup = _env_int("LEXBENCH_WARMUP")
        env_iterations = _env_int("LEXBENCH_ITERATIONS")
        return replace(
            config,
            warmup_iterations=preset.warmup_iterations if env_warmup is None else env_warmup,
            benchmark_iterations=preset.benchmark_iterations if env_iterations is None else env_iterations,
        )

    @classmethod
    def from_env(cls) -> "BenchConfig":
        """Default configuration overlaid with ``LEXBENCH_*`` environment variables."""

        config = cls.default()
        warmup = _env_int("LEXBENCH_WARMUP")
        iterations = _env_int("LEXBENCH_ITERATIONS")
        band = _env_float("LEXBENCH_REGRESSION_BAND")
        fail_below = _env_float("LEXBENCH_FAIL_BELOW")
        warn_below = _env_float("LEXBENCH_WARN_BELOW")
        results_dir = (os.getenv("LEXBENCH_RESULTS_DIR") or "").strip()

        if warmup is not None:
            config.warmup_iterations = warmup
        if iterations is not None:
            config.benchmark_iterations = iterations
        if band is not None:
            config.regression_band = band
        if results_dir:
            config.results_dir = Path(results_dir)
        if fail_below is not None or warn_below is not None:
            config.thresholds = GateThresholds(
                fail_below=config.thresholds.fail_below if fail_below is None else fail_below,
                warn_below=config.thresholds.warn_below if warn_below is None else warn_below,
            )
        return config


def _env_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    return int(raw) if raw else None


def _env_float(name: str) -> float | None:
    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else None
