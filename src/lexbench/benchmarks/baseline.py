"""Result persistence and comparison against a stored baseline."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence

from lexbench.shared.config import DEFAULT_REGRESSION_BAND
from lexbench.shared.errors import BaselineFormatError

from .results import Result


class ChangeVerdict(str, Enum):
    FASTER = "faster"
    WITHIN_NOISE = "within_noise"
    REGRESSION = "regression"


@dataclass(frozen=True, slots=True)
class Comparison:
    name: str
    baseline_mean: float
    current_mean: float
    improvement: float
    verdict: ChangeVerdict


def classify_change(improvement: float, *, band: float = DEFAULT_REGRESSION_BAND) -> ChangeVerdict:
    """Classifies a percentage change; exactly ``-band`` counts as noise."""

    if improvement > 0:
        return ChangeVerdict.FASTER
    if improvement < -band:
        return ChangeVerdict.REGRESSION
    return ChangeVerdict.WITHIN_NOISE


def improvement_percent(baseline_mean: float, current_mean: float) -> float:
    return (baseline_mean - current_mean) / baseline_mean * 100


def write_results(results: Iterable[Result], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [result.to_dict() for result in results]
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def read_results(path: Path) -> list[Result]:
    """Loads a results file; raises :class:`BaselineFormatError` on bad content."""

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BaselineFormatError(str(path), f"invalid JSON ({exc})") from exc

    if not isinstance(payload, list):
        raise BaselineFormatError(str(path), "top-level value is not an array")

    results: list[Result] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise BaselineFormatError(str(path), f"entry {index} is not an object")
        try:
            results.append(Result.from_dict(entry))
        except KeyError as exc:
            raise BaselineFormatError(str(path), f"entry {index} is missing {exc.args[0]}") from exc
        except (TypeError, ValueError) as exc:
            raise BaselineFormatError(str(path), f"entry {index}: {exc}") from exc
    return results


def find_result(results: Sequence[Result], name: str) -> Result | None:
    return next((result for result in results if result.name == name), None)


def compare_results(
    current: Sequence[Result],
    baseline: Sequence[Result],
    *,
    band: float = DEFAULT_REGRESSION_BAND,
) -> list[Comparison]:
    """Pairs current results with the first baseline entry of the same name.

    Results without a baseline counterpart, or whose baseline mean is not
    positive, are left out.
    """

    comparisons: list[Comparison] = []
    for result in current:
        reference = find_result(baseline, result.name)
        if reference is None or reference.mean <= 0.0:
            continue
        improvement = improvement_percent(reference.mean, result.mean)
        comparisons.append(
            Comparison(
                name=result.name,
                baseline_mean=reference.mean,
                current_mean=result.mean,
                improvement=improvement,
                verdict=classify_change(improvement, band=band),
            )
        )
    return comparisons
