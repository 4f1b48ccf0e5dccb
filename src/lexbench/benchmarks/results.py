"""Statistical benchmark results."""

from __future__ import annotations

import statistics
from dataclasses import asdict, dataclass
from typing import Any, Sequence

RESULT_FIELDS = ("name", "unit", "mean", "std_dev", "min", "max", "iterations", "total_time")


@dataclass(frozen=True, slots=True)
class Result:
    """Summary of the measured iterations of one benchmark."""

    name: str
    unit: str
    mean: float
    std_dev: float
    min: float
    max: float
    iterations: int
    total_time: float

    @classmethod
    def from_samples(cls, name: str, samples: Sequence[float], *, unit: str = "seconds") -> "Result":
        """Aggregates per-iteration durations into a result.

        The standard deviation is the population one: the samples are the
        whole measurement, not a draw from it.
        """

        if not samples:
            raise ValueError("at least one sample is required")

        total = sum(samples)
        lo = min(samples)
        hi = max(samples)
        # Rounding in the sum can push the mean just outside the extremes.
        mean = min(max(total / len(samples), lo), hi)
        return cls(
            name=name,
            unit=unit,
            mean=mean,
            std_dev=statistics.pstdev(samples),
            min=lo,
            max=hi,
            iterations=len(samples),
            total_time=total,
        )

    def tokens_per_second(self, token_count: int) -> float:
        if self.mean <= 0.0:
            return 0.0
        return token_count / self.mean

    def relative_std_dev(self) -> float:
        """Standard deviation as a percentage of the mean."""

        if self.mean <= 0.0:
            return 0.0
        return self.std_dev / self.mean * 100

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Result":
        missing = [key for key in RESULT_FIELDS if key not in payload]
        if missing:
            raise KeyError(", ".join(missing))
        iterations = payload["iterations"]
        if isinstance(iterations, bool) or not isinstance(iterations, int):
            raise ValueError(f"iterations must be an integer, got {iterations!r}")
        return cls(
            name=str(payload["name"]),
            unit=str(payload["unit"]),
            mean=float(payload["mean"]),
            std_dev=float(payload["std_dev"]),
            min=float(payload["min"]),
            max=float(payload["max"]),
            iterations=iterations,
            total_time=float(payload["total_time"]),
        )
