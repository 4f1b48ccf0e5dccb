"""Throughput gate for automated regression checks.

A hard failure terminates the process with status 1, which stops any
benchmark that has not run yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from lexbench.shared.config import GateThresholds
from lexbench.shared.formatting import format_number

from .memory import Workload
from .results import Result
from .runner import Runner


class GateStatus(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class GateOutcome:
    result: Result
    tokens_per_second: float
    status: GateStatus


def classify_throughput(tokens_per_second: float, thresholds: GateThresholds) -> GateStatus:
    if tokens_per_second < thresholds.fail_below:
        return GateStatus.FAIL
    if tokens_per_second < thresholds.warn_below:
        return GateStatus.WARN
    return GateStatus.PASS


class RegressionGate:
    def __init__(self, runner: Runner, thresholds: GateThresholds | None = None) -> None:
        self._runner = runner
        self.thresholds = thresholds or GateThresholds()
        self._logger = structlog.get_logger(__name__)

    def check(self, name: str, token_count: int, workload: Workload) -> GateOutcome:
        """Benchmarks ``workload`` and applies the thresholds.

        Raises ``SystemExit(1)`` when throughput is below ``fail_below``.
        """

        result = self._runner.throughput_benchmark(name, token_count, workload)
        tps = result.tokens_per_second(token_count)
        status = classify_throughput(tps, self.thresholds)

        if status is GateStatus.FAIL:
            self._logger.error(
                "gate-failure",
                name=result.name,
                tokens_per_second=format_number(tps),
                minimum=format_number(self.thresholds.fail_below),
            )
            raise SystemExit(1)
        if status is GateStatus.WARN:
            self._logger.warning(
                "gate-warning",
                name=result.name,
                tokens_per_second=format_number(tps),
                target=format_number(self.thresholds.warn_below),
            )
        else:
            self._logger.info("gate-pass", name=result.name, tokens_per_second=format_number(tps))

        return GateOutcome(result=result, tokens_per_second=tps, status=status)
