"""Tests for the benchmark runner."""

from __future__ import annotations

import json
import time
import tracemalloc

import pytest

from lexbench.benchmarks.runner import Runner


def test_runner_rejects_invalid_iteration_counts() -> None:
    with pytest.raises(ValueError):
        Runner(warmup_iterations=-1, benchmark_iterations=5)
    with pytest.raises(ValueError):
        Runner(warmup_iterations=0, benchmark_iterations=0)


def test_benchmark_runs_warmup_then_measurement(step_clock) -> None:
    calls: list[int] = []
    runner = Runner(warmup_iterations=2, benchmark_iterations=3, clock=step_clock([0.1, 0.2, 0.3]))

    result = runner.benchmark("counting", lambda: calls.append(1))

    assert len(calls) == 5
    assert result.iterations == 3
    assert result.total_time == pytest.approx(0.6)
    assert result.mean == pytest.approx(0.2)
    assert result.min == pytest.approx(0.1)
    assert result.max == pytest.approx(0.3)
    assert result.std_dev > 0


def test_warmup_samples_are_not_recorded(step_clock) -> None:
    # The clock is only read during measurement, so warmup cannot shift it.
    runner = Runner(warmup_iterations=10, benchmark_iterations=2, clock=step_clock([0.05]))
    result = runner.benchmark("warm", lambda: None)

    assert result.total_time == pytest.approx(0.1)
    assert result.std_dev == 0.0


def test_history_preserves_call_order(step_clock) -> None:
    runner = Runner(warmup_iterations=0, benchmark_iterations=1, clock=step_clock([0.01]))
    for name in ("first", "second", "third"):
        runner.benchmark(name, lambda: None)

    assert [r.name for r in runner.results] == ["first", "second", "third"]


def test_histories_are_per_runner(step_clock) -> None:
    a = Runner(0, 1, clock=step_clock([0.01]))
    b = Runner(0, 1, clock=step_clock([0.01]))
    a.benchmark("only-a", lambda: None)

    assert len(a.results) == 1
    assert b.results == ()


def test_throughput_benchmark_names_item_count(step_clock) -> None:
    runner = Runner(0, 4, clock=step_clock([0.001]))
    result = runner.throughput_benchmark("Scan", 500, lambda: None)

    assert result.name == "Scan (500 items)"
    assert result.tokens_per_second(500) == pytest.approx(500_000.0)
    assert runner.results == (result,)


def test_memory_benchmark_is_single_shot(step_clock, heap_probe) -> None:
    calls: list[int] = []
    probe = heap_probe([1_000, 5_000])
    runner = Runner(3, 10, heap_probe=probe, clock=step_clock([0.25]))

    elapsed, memory_used, final_heap = runner.memory_benchmark("alloc", lambda: calls.append(1))

    assert calls == [1]
    assert elapsed == pytest.approx(0.25)
    assert memory_used == 4_000
    assert final_heap == 5_000
    assert runner.results == ()


def test_memory_benchmark_does_not_leave_tracing_on_for_timing() -> None:
    was_tracing = tracemalloc.is_tracing()
    runner = Runner(warmup_iterations=0, benchmark_iterations=2)
    traced_during_timing: list[bool] = []

    runner.memory_benchmark("alloc", lambda: bytearray(10_000))
    runner.benchmark("after", lambda: traced_during_timing.append(tracemalloc.is_tracing()))

    assert traced_during_timing == [was_tracing, was_tracing]
    assert tracemalloc.is_tracing() is was_tracing


def test_sleep_workload_end_to_end() -> None:
    runner = Runner(warmup_iterations=0, benchmark_iterations=3)
    result = runner.benchmark("sleep", lambda: time.sleep(0.01))

    assert result.iterations == 3
    assert 0.009 <= result.mean < 0.05
    assert result.std_dev < 0.02
    assert result.total_time == pytest.approx(result.mean * 3)


def test_save_results_creates_directories(tmp_path, step_clock) -> None:
    runner = Runner(0, 2, clock=step_clock([0.1, 0.3]))
    runner.benchmark("a", lambda: None)
    runner.benchmark("b", lambda: None)

    path = runner.save_results(tmp_path / "nested" / "dir" / "results.json")

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert [entry["name"] for entry in payload] == ["a", "b"]
    assert payload[0]["iterations"] == 2
    assert payload[0]["mean"] == pytest.approx(0.2)


def test_save_results_propagates_write_errors(tmp_path, step_clock) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    runner = Runner(0, 1, clock=step_clock([0.1]))
    runner.benchmark("a", lambda: None)

    with pytest.raises(OSError):
        runner.save_results(blocker / "results.json")


def test_compare_with_missing_baseline_is_noop(tmp_path, step_clock) -> None:
    runner = Runner(0, 1, clock=step_clock([0.1]))
    runner.benchmark("a", lambda: None)

    assert runner.compare_with_baseline(tmp_path / "missing.json") == []


def test_compare_with_saved_baseline(tmp_path, step_clock) -> None:
    baseline = Runner(0, 2, clock=step_clock([0.10]))
    baseline.benchmark("steady", lambda: None)
    baseline.benchmark("slower", lambda: None)
    path = baseline.save_results(tmp_path / "baseline.json")

    current = Runner(0, 1, clock=step_clock([0.10, 0.20, 0.05]))
    current.benchmark("steady", lambda: None)
    current.benchmark("slower", lambda: None)
    current.benchmark("new", lambda: None)

    comparisons = current.compare_with_baseline(path)

    assert [c.name for c in comparisons] == ["steady", "slower"]
    assert comparisons[0].verdict.value == "within_noise"
    assert comparisons[1].verdict.value == "regression"
    assert comparisons[1].improvement == pytest.approx(-100.0)


def test_compare_with_malformed_baseline_raises(tmp_path, step_clock) -> None:
    path = tmp_path / "baseline.json"
    path.write_text("{not json", encoding="utf-8")
    runner = Runner(0, 1, clock=step_clock([0.1]))
    runner.benchmark("a", lambda: None)

    with pytest.raises(ValueError):
        runner.compare_with_baseline(path)
