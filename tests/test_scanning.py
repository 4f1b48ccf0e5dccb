"""Tests for the scanning collaborators used as workloads."""

from __future__ import annotations

import pytest

from lexbench.benchmarks.synthetic import (
    generate_class_code,
    generate_function_code,
    generate_javascript,
    generate_json,
    generate_module_code,
    generate_scaling_code,
    generate_scaling_content,
)
from lexbench.scanning import (
    RuleScanner,
    TokenRule,
    count_tokens,
    javascript_scanner,
    json_scanner,
    load_scanner,
    scaling_scanner,
    words_scanner,
)
from lexbench.shared.errors import ScannerLoadError


def test_words_scanner_skips_whitespace() -> None:
    tokens, diagnostics = words_scanner().scan("hello  world\n")

    assert [t.text for t in tokens] == ["hello", "world"]
    assert [t.offset for t in tokens] == [0, 7]
    assert diagnostics == []


def test_unmatched_characters_become_diagnostics() -> None:
    tokens, diagnostics = words_scanner().scan("a ! b")

    assert [t.text for t in tokens] == ["a", "b"]
    assert len(diagnostics) == 1
    assert diagnostics[0].offset == 2


def test_longest_match_then_priority() -> None:
    scanner = RuleScanner(
        [
            TokenRule("ID", r"[a-z]+", priority=1),
            TokenRule("IF", r"if", priority=10),
            TokenRule("WS", r"\s+", skip=True),
        ]
    )
    tokens, _ = scanner.scan("if iffy")

    assert [(t.kind, t.text) for t in tokens] == [("IF", "if"), ("ID", "iffy")]


def test_rule_scanner_requires_rules() -> None:
    with pytest.raises(ValueError):
        RuleScanner([])


def test_json_scanner_token_kinds() -> None:
    tokens, diagnostics = json_scanner().scan('{"a": [1, true, null, -2.5e3]}')

    assert [t.kind for t in tokens] == [
        "LBRACE", "STRING", "COLON", "LBRACKET", "NUMBER", "COMMA", "TRUE",
        "COMMA", "NULL", "COMMA", "NUMBER", "RBRACKET", "RBRACE",
    ]
    assert diagnostics == []


@pytest.mark.parametrize(
    ("factory", "content"),
    [
        (json_scanner, generate_json("medium")),
        (javascript_scanner, generate_javascript(20)),
        (javascript_scanner, generate_function_code(20)),
        (javascript_scanner, generate_class_code(20)),
        (javascript_scanner, generate_module_code(20)),
        (scaling_scanner, generate_scaling_code(20)),
        (scaling_scanner, generate_scaling_content(40)),
    ],
)
def test_presets_cover_generated_inputs(factory, content: str) -> None:
    tokens, diagnostics = factory().scan(content)

    assert tokens
    assert diagnostics == []


def test_javascript_keywords_beat_identifiers() -> None:
    tokens, _ = javascript_scanner().scan("function functional const")

    assert [t.kind for t in tokens] == ["FUNCTION", "IDENTIFIER", "CONST"]


def test_count_tokens() -> None:
    assert count_tokens(words_scanner(), "one two three") == 3


def test_load_scanner_preset_and_import_path() -> None:
    assert isinstance(load_scanner("json"), RuleScanner)
    assert load_scanner("lexbench.scanning.presets:words_scanner").name == "words"


def test_load_scanner_accepts_instances(monkeypatch) -> None:
    import lexbench.scanning.presets as presets

    instance = words_scanner()
    monkeypatch.setattr(presets, "READY", instance, raising=False)

    assert load_scanner("lexbench.scanning.presets:READY") is instance


@pytest.mark.parametrize(
    "target",
    [
        "not-a-preset",
        "lexbench.does_not_exist:scanner",
        "lexbench.scanning.presets:missing",
        "lexbench.scanning.rules:RuleScanner",
        "lexbench.scanning.presets:PRESETS",
    ],
)
def test_load_scanner_errors(target: str) -> None:
    with pytest.raises(ScannerLoadError):
        load_scanner(target)
