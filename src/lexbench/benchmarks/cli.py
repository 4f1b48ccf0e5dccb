"""CLI entrypoint for running benchmark suites."""

from __future__ import annotations

import random
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from dataclasses import replace
from pathlib import Path

import structlog

from lexbench.scanning import Scanner, load_scanner
from lexbench.shared import BenchConfig, ScannerLoadError, configure_logging

from .runner import BenchmarkReport, Runner, write_report
from .suites import SUITES, run_ci, run_full, run_lexer, run_memory, run_quick


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="lexbench",
        description="Measure scanner throughput and memory use, and detect regressions against a baseline.",
    )
    parser.add_argument(
        "--suite",
        choices=SUITES,
        default="full",
        help="Benchmark suite to run (default: full)",
    )
    parser.add_argument(
        "--save",
        type=Path,
        help="Write all results to this JSON file after the suite finishes",
    )
    parser.add_argument(
        "--compare",
        type=Path,
        help="Compare results with this baseline JSON file (skipped when missing)",
    )
    parser.add_argument(
        "--warmup",
        type=_non_negative_int,
        help="Warmup iterations per benchmark (default: suite preset)",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        help="Measured iterations per benchmark (default: suite preset)",
    )
    parser.add_argument(
        "--results-dir",
        type=Path,
        help="Directory for suite result files and baseline.json (default: results)",
    )
    parser.add_argument(
        "--scanner",
        type=str,
        help="Scanner to measure: a preset name or 'module:attribute' (default: per-input presets)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for generated fixture values (default: unseeded)",
    )
    parser.add_argument(
        "--report-dir",
        type=Path,
        help="Also write JSON and Markdown reports into this directory",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show per-iteration progress and debug logs",
    )
    return parser


def _resolve_config(args: Namespace) -> BenchConfig:
    config = BenchConfig.for_suite(args.suite)
    if args.warmup is not None:
        config = replace(config, warmup_iterations=args.warmup)
    if args.iterations is not None:
        config = replace(config, benchmark_iterations=args.iterations)
    if args.results_dir is not None:
        config = replace(config, results_dir=args.results_dir)
    return config


def _run_suite(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)
    config = _resolve_config(args)

    scanner: Scanner | None = None
    if args.scanner:
        try:
            scanner = load_scanner(args.scanner)
        except ScannerLoadError as exc:
            logger.error("scanner-load-failed", scanner=args.scanner, error=str(exc))
            return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    runner = Runner(
        warmup_iterations=config.warmup_iterations,
        benchmark_iterations=config.benchmark_iterations,
        regression_band=config.regression_band,
    )

    logger.info(
        "suite-start",
        suite=args.suite,
        warmup=config.warmup_iterations,
        iterations=config.benchmark_iterations,
    )
    if args.suite == "quick":
        run_quick(runner, rng=rng)
    elif args.suite == "lexer":
        run_lexer(runner, config, scanner=scanner, rng=rng)
    elif args.suite == "ci":
        run_ci(runner, config, scanner=scanner, rng=rng)
    elif args.suite == "memory":
        run_memory(runner, scanner=scanner)
    else:
        run_full(runner, scanner=scanner, rng=rng)

    if args.save is not None:
        runner.save_results(args.save)

    comparisons = []
    if args.compare is not None:
        comparisons = runner.compare_with_baseline(args.compare)

    if args.report_dir is not None:
        report = BenchmarkReport.from_runner(runner, comparisons)
        for path in write_report(report, output_dir=args.report_dir):
            logger.info("report-written", path=str(path))

    logger.info("suite-complete", suite=args.suite, benchmarks=len(runner.results))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)
    configure_logging(level=10 if args.verbose else 20)
    if unknown:
        structlog.get_logger(__name__).debug("ignored-arguments", arguments=unknown)
    return _run_suite(args)


if __name__ == "__main__":
    sys.exit(main())
