"""Tests for benchmark report generation."""

from __future__ import annotations

import json

from lexbench.benchmarks.runner import BenchmarkReport, Runner, write_report


def test_benchmark_report_writes_json_and_markdown(tmp_path, step_clock) -> None:
    baseline = Runner(0, 2, clock=step_clock([0.2]))
    baseline.benchmark("JSON lexer (small)", lambda: None)
    baseline_path = baseline.save_results(tmp_path / "baseline.json")

    runner = Runner(0, 2, clock=step_clock([0.1]))
    runner.benchmark("JSON lexer (small)", lambda: None)
    runner.benchmark("Minimal lexer (tiny)", lambda: None)
    comparisons = runner.compare_with_baseline(baseline_path)

    report = BenchmarkReport.from_runner(runner, comparisons)
    written = write_report(report, output_dir=tmp_path / "reports", stem="report", formats=("json", "md"))

    paths = {p.name: p for p in written}
    assert "report.json" in paths
    assert "report.md" in paths

    payload = json.loads(paths["report.json"].read_text(encoding="utf-8"))
    assert "created_at" in payload
    assert [r["name"] for r in payload["results"]] == ["JSON lexer (small)", "Minimal lexer (tiny)"]
    assert payload["comparisons"][0]["verdict"] == "faster"

    md = paths["report.md"].read_text(encoding="utf-8")
    assert "# Benchmark Report" in md
    assert "| JSON lexer (small) | 100.0ms |" in md
    assert "- JSON lexer (small): +50.00% (faster)" in md


def test_report_without_comparisons_omits_section(tmp_path, step_clock) -> None:
    runner = Runner(0, 1, clock=step_clock([0.0005]))
    runner.benchmark("tiny", lambda: None)

    written = write_report(BenchmarkReport.from_runner(runner), output_dir=tmp_path, formats=("md",))

    assert [p.name for p in written] == ["benchmark_report.md"]
    md = written[0].read_text(encoding="utf-8")
    assert "500.0μs" in md
    assert "Baseline Comparison" not in md
