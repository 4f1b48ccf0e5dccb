"""Benchmark suites run by the command line interface."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import structlog

from lexbench.scanning import Scanner, count_tokens, javascript_scanner, json_scanner, scaling_scanner, words_scanner
from lexbench.shared.config import BenchConfig
from lexbench.shared.formatting import format_bytes, format_number

from .gate import RegressionGate
from .memory import bytes_per_token, overhead_ratio, rate_memory_efficiency, rate_memory_scaling, tokens_per_mib
from .results import Result
from .runner import Runner
from .synthetic import (
    generate_class_code,
    generate_expression_code,
    generate_function_code,
    generate_javascript,
    generate_js_content,
    generate_json,
    generate_module_code,
    generate_program,
    generate_scaling_code,
    generate_scaling_content,
)

logger = structlog.get_logger(__name__)

SCALING_LINE_COUNTS = (100, 500, 1000, 5000, 10000)
MEMORY_SCALING_TOKENS = (100, 500, 1000, 2500, 5000)
LEXER_SCALING_TOKENS = (500, 1000, 2500, 5000, 10000)
LEXER_RESULTS_FILE = "comprehensive_lexer_results.json"


def rate_throughput(tokens_per_second: float) -> str:
    if tokens_per_second >= 100_000:
        return "outstanding"
    if tokens_per_second >= 50_000:
        return "excellent"
    if tokens_per_second >= 10_000:
        return "good"
    return "below-target"


def rate_scaling(tokens_per_second: float) -> str:
    if tokens_per_second >= 100_000:
        return "excellent"
    if tokens_per_second >= 50_000:
        return "good"
    if tokens_per_second >= 10_000:
        return "acceptable"
    return "below-target"


def _pick(override: Scanner | None, factory: Callable[[], Scanner]) -> Scanner:
    return override if override is not None else factory()


def benchmark_scanner(runner: Runner, scanner: Scanner, name: str, content: str) -> Result:
    token_count = count_tokens(scanner, content)
    result = runner.throughput_benchmark(name, token_count, lambda: scanner.scan(content))

    tps = result.tokens_per_second(token_count)
    logger.info(
        "scanner-throughput",
        name=result.name,
        size=format_bytes(len(content.encode("utf-8"))),
        tokens=token_count,
        tokens_per_second=format_number(tps),
        rating=rate_throughput(tps),
    )
    return result


def run_quick(runner: Runner, *, rng: random.Random | None = None) -> Result:
    """Smoke test of the measurement loop and the JSON generator."""

    result = runner.benchmark("List creation", lambda: [list(range(100)) for _ in range(1000)])

    sample = generate_json("small", rng=rng)
    logger.info("fixture-sample", size=format_bytes(len(sample.encode("utf-8"))), head=sample[:100])
    return result


def run_full(runner: Runner, *, scanner: Scanner | None = None, rng: random.Random | None = None) -> None:
    words = _pick(scanner, words_scanner)
    word_inputs = {
        "tiny": "hello world",
        "small": "the quick brown fox jumps over the lazy dog " * 10,
        "medium": "word " * 1000,
        "large": "identifier " * 10000,
    }
    for size, content in word_inputs.items():
        benchmark_scanner(runner, words, f"Minimal lexer ({size})", content)

    json_lexer = _pick(scanner, json_scanner)
    for complexity, size in (("simple", "small"), ("nested", "medium"), ("complex", "large")):
        benchmark_scanner(runner, json_lexer, f"JSON lexer ({complexity})", generate_json(size, rng=rng))

    js_lexer = _pick(scanner, javascript_scanner)
    benchmark_scanner(runner, js_lexer, "JavaScript lexer", generate_javascript(500))
    js_inputs = {
        "function": generate_function_code(50),
        "class": generate_class_code(100),
        "module": generate_module_code(200),
    }
    for kind, content in js_inputs.items():
        benchmark_scanner(runner, js_lexer, f"JavaScript lexer ({kind})", content)

    scaling = _pick(scanner, scaling_scanner)
    for line_count in SCALING_LINE_COUNTS:
        content = generate_scaling_code(line_count)
        result = benchmark_scanner(runner, scaling, f"Scaling test ({line_count} lines)", content)
        if result.mean > 0:
            logger.info(
                "scaling-bytes",
                lines=line_count,
                bytes_per_second=format_number(len(content.encode("utf-8")) / result.mean),
            )

    def _generate_and_scan_large_json() -> None:
        for _ in range(10):
            json_lexer.scan(generate_json("large", rng=rng))

    runner.memory_benchmark("Large JSON lexing (memory)", _generate_and_scan_large_json)


def run_lexer(
    runner: Runner,
    config: BenchConfig,
    *,
    scanner: Scanner | None = None,
    rng: random.Random | None = None,
) -> Path:
    """Scanner throughput across word, JSON, JavaScript and scaling inputs.

    Results are written to ``comprehensive_lexer_results.json`` in the
    configured results directory, which is returned.
    """

    words = _pick(scanner, words_scanner)
    word_inputs = {
        "tiny": "hello world test",
        "small": "word " * 100,
        "medium": "identifier " * 1000,
        "large": "token " * 5000,
    }
    for size, content in word_inputs.items():
        benchmark_scanner(runner, words, f"Word lexer ({size})", content)

    json_lexer = _pick(scanner, json_scanner)
    for complexity, size in (("simple", "small"), ("complex", "medium"), ("nested", "large")):
        benchmark_scanner(runner, json_lexer, f"JSON lexer ({complexity})", generate_json(size, rng=rng))

    js_lexer = _pick(scanner, javascript_scanner)
    js_inputs = {
        "function": generate_function_code(25),
        "class": generate_class_code(50),
        "expressions": generate_expression_code(75),
    }
    for kind, content in js_inputs.items():
        benchmark_scanner(runner, js_lexer, f"JavaScript lexer ({kind})", content)

    scaling = _pick(scanner, scaling_scanner)
    for target_tokens in LEXER_SCALING_TOKENS:
        # about four tokens per generated line
        content = generate_scaling_code(target_tokens // 4)
        token_count = count_tokens(scaling, content)
        result = runner.throughput_benchmark(
            f"Scaling ({token_count} tokens)", token_count, lambda content=content: scaling.scan(content)
        )
        tps = result.tokens_per_second(token_count)
        size = len(content.encode("utf-8"))
        logger.info(
            "scaling-throughput",
            target=target_tokens,
            tokens=token_count,
            size=format_bytes(size),
            tokens_per_second=format_number(tps),
            bytes_per_second=format_number(size / result.mean) if result.mean > 0 else "0.0",
            rating=rate_scaling(tps),
        )

    return runner.save_results(Path(config.results_dir) / LEXER_RESULTS_FILE)


def run_ci(
    runner: Runner,
    config: BenchConfig,
    *,
    scanner: Scanner | None = None,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> Path:
    """Gated benchmarks; saves a timestamped results file and compares it.

    Exits the process with status 1 if any benchmark falls below the
    configured failure threshold.
    """

    gate = RegressionGate(runner, config.thresholds)
    cases = (
        ("CI: Simple lexer", _pick(scanner, words_scanner), "hello world test " * 50),
        ("CI: JSON lexer", _pick(scanner, json_scanner), generate_json("small", rng=rng)),
        ("CI: Programming lexer", _pick(scanner, javascript_scanner), generate_program(25)),
    )
    for name, lexer, content in cases:
        gate.check(name, count_tokens(lexer, content), lambda lexer=lexer, content=content: lexer.scan(content))

    stamp = (now or datetime.now(timezone.utc)).strftime("%Y%m%d_%H%M%S")
    results_file = runner.save_results(Path(config.results_dir) / f"ci_benchmark_{stamp}.json")

    baseline_file = Path(config.results_dir) / "baseline.json"
    if baseline_file.exists():
        runner.compare_with_baseline(baseline_file)
    else:
        logger.info("baseline-not-found", hint=f"cp {results_file} {baseline_file}")
    return results_file


def run_memory(runner: Runner, *, scanner: Scanner | None = None) -> None:
    words = _pick(scanner, words_scanner)
    js_lexer = _pick(scanner, javascript_scanner)
    cases = (
        ("Simple content", "hello world test " * 100, words),
        ("Complex content", generate_js_content(100), js_lexer),
        ("Large simple", "token " * 5000, words),
        ("Large complex", generate_js_content(500), js_lexer),
    )
    for name, content, lexer in cases:
        profile_scanner_memory(runner, lexer, name, content)

    scaling = _pick(scanner, scaling_scanner)
    for token_target in MEMORY_SCALING_TOKENS:
        content = generate_scaling_content(token_target)
        token_count = count_tokens(scaling, content)
        profile = runner.memory_benchmark(f"Scaling ({token_target} tokens)", lambda: scaling.scan(content))
        per_mib = tokens_per_mib(profile.memory_used, token_count)
        logger.info(
            "scaling-efficiency",
            tokens=token_count,
            tokens_per_second=format_number(token_count / profile.elapsed) if profile.elapsed > 0 else "0.0",
            tokens_per_mib=round(per_mib),
            rating=rate_memory_scaling(per_mib),
        )


def profile_scanner_memory(runner: Runner, scanner: Scanner, name: str, content: str) -> None:
    size = len(content.encode("utf-8"))
    token_count = count_tokens(scanner, content)

    profile = runner.memory_benchmark(f"{name} (detailed)", lambda: scanner.scan(content))

    per_token = bytes_per_token(profile.memory_used, token_count)
    logger.info(
        "memory-efficiency",
        name=name,
        size=format_bytes(size),
        tokens=token_count,
        bytes_per_token=round(per_token, 2),
        overhead_ratio=round(overhead_ratio(profile.memory_used, size), 2),
        rating=rate_memory_efficiency(per_token),
    )


SUITES = ("quick", "full", "lexer", "ci", "memory")
