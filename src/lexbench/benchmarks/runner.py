"""Benchmark runner and report generation."""

from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import structlog
from structlog.stdlib import BoundLogger

from lexbench.shared.config import DEFAULT_REGRESSION_BAND
from lexbench.shared.formatting import format_bytes, format_number, format_time

from .baseline import ChangeVerdict, Comparison, compare_results, read_results, write_results
from .memory import HeapProbe, MemoryProfile, Workload, measure_memory
from .results import Result

PROGRESS_EVERY = 10


class Runner:
    """Runs workloads through warmup and measurement phases.

    Every call to :meth:`benchmark` appends its result to the runner's
    history, which can be saved and compared against a baseline file.
    """

    def __init__(
        self,
        warmup_iterations: int = 5,
        benchmark_iterations: int = 50,
        *,
        regression_band: float = DEFAULT_REGRESSION_BAND,
        heap_probe: HeapProbe | None = None,
        clock: Callable[[], float] = time.perf_counter,
        logger: BoundLogger | None = None,
    ) -> None:
        if warmup_iterations < 0:
            raise ValueError("warmup_iterations must be >= 0")
        if benchmark_iterations <= 0:
            raise ValueError("benchmark_iterations must be > 0")
        self.warmup_iterations = int(warmup_iterations)
        self.benchmark_iterations = int(benchmark_iterations)
        self.regression_band = float(regression_band)
        self._heap_probe = heap_probe
        self._clock = clock
        self._logger = logger or structlog.get_logger(__name__)
        self._results: list[Result] = []

    @property
    def results(self) -> tuple[Result, ...]:
        return tuple(self._results)

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------

    def benchmark(self, name: str, workload: Workload, unit: str = "seconds") -> Result:
        self._logger.info("benchmark-warmup", name=name, iterations=self.warmup_iterations)
        for _ in range(self.warmup_iterations):
            workload()

        self._logger.info("benchmark-start", name=name, iterations=self.benchmark_iterations)
        samples: list[float] = []
        for i in range(self.benchmark_iterations):
            start = self._clock()
            workload()
            samples.append(self._clock() - start)

            if (i + 1) % PROGRESS_EVERY == 0:
                self._logger.debug(
                    "benchmark-progress",
                    name=name,
                    completed=i + 1,
                    total=self.benchmark_iterations,
                )

        result = Result.from_samples(name, samples, unit=unit)
        self._results.append(result)

        self._logger.info(
            "benchmark-result",
            name=name,
            mean=format_time(result.mean),
            std_dev=format_time(result.std_dev),
            relative_std_dev=round(result.relative_std_dev(), 2),
            range=f"{format_time(result.min)} - {format_time(result.max)}",
        )
        return result

    def throughput_benchmark(self, name: str, item_count: int, workload: Workload) -> Result:
        result = self.benchmark(f"{name} ({item_count} items)", workload)
        self._logger.info(
            "throughput",
            name=result.name,
            items_per_second=format_number(result.tokens_per_second(item_count)),
        )
        return result

    def memory_benchmark(self, name: str, workload: Workload) -> MemoryProfile:
        profile = measure_memory(workload, probe=self._heap_probe, clock=self._clock)
        self._logger.info(
            "memory-benchmark",
            name=name,
            time=format_time(profile.elapsed),
            memory_used=format_bytes(profile.memory_used),
            final_heap_size=format_bytes(profile.final_heap_size),
        )
        return profile

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_results(self, path: Path | str) -> Path:
        written = write_results(self._results, Path(path))
        self._logger.info("results-saved", path=str(written), count=len(self._results))
        return written

    def compare_with_baseline(self, path: Path | str) -> list[Comparison]:
        path = Path(path)
        if not path.exists():
            self._logger.debug("baseline-missing", path=str(path))
            return []

        comparisons = compare_results(self._results, read_results(path), band=self.regression_band)
        for comparison in comparisons:
            log = self._logger.warning if comparison.verdict is ChangeVerdict.REGRESSION else self._logger.info
            log(
                "baseline-comparison",
                name=comparison.name,
                baseline=format_time(comparison.baseline_mean),
                current=format_time(comparison.current_mean),
                change_percent=round(comparison.improvement, 2),
                verdict=comparison.verdict.value,
            )
        return comparisons


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    created_at: str
    results: list[dict]
    comparisons: list[dict] = field(default_factory=list)

    @classmethod
    def from_runner(cls, runner: Runner, comparisons: list[Comparison] | None = None) -> "BenchmarkReport":
        return cls(
            created_at=datetime.now(timezone.utc).isoformat(),
            results=[result.to_dict() for result in runner.results],
            comparisons=[
                {**asdict(comparison), "verdict": comparison.verdict.value}
                for comparison in comparisons or []
            ],
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append("# Benchmark Report")
        lines.append("")
        lines.append(f"Generated: {self.created_at}")
        lines.append("")

        if self.results:
            lines.append("## Results")
            lines.append("")
            lines.append("| Benchmark | Mean | Std Dev | Min | Max | Iterations |")
            lines.append("|---|---|---|---|---|---|")
            for result in self.results:
                lines.append(
                    f"| {result['name']} | {format_time(result['mean'])} | {format_time(result['std_dev'])} "
                    f"| {format_time(result['min'])} | {format_time(result['max'])} | {result['iterations']} |"
                )
            lines.append("")

        if self.comparisons:
            lines.append("## Baseline Comparison")
            lines.append("")
            for comparison in self.comparisons:
                lines.append(
                    f"- {comparison['name']}: {comparison['improvement']:+.2f}% ({comparison['verdict']})"
                )
            lines.append("")

        return "\n".join(lines).rstrip() + "\n"


def write_report(
    report: BenchmarkReport,
    *,
    output_dir: Path,
    stem: str = "benchmark_report",
    formats: tuple[str, ...] = ("json", "md"),
) -> list[Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    if "json" in formats:
        path = output_dir / f"{stem}.json"
        path.write_text(report.to_json(), encoding="utf-8")
        written.append(path)

    if "md" in formats:
        path = output_dir / f"{stem}.md"
        path.write_text(report.to_markdown(), encoding="utf-8")
        written.append(path)

    return written
