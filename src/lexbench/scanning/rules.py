"""Regex rule scanner used as the default benchmark workload.

Longest match wins; equal-length matches go to the higher priority rule and
then to the earlier declared rule. Characters no rule matches are reported as
diagnostics and skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .base import Diagnostic, Token


@dataclass(frozen=True, slots=True)
class TokenRule:
    kind: str
    pattern: str
    priority: int = 0
    skip: bool = False
    flags: int = 0
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regex", re.compile(self.pattern, self.flags))


class RuleScanner:
    """Scanner driven by an ordered list of :class:`TokenRule`."""

    def __init__(self, rules: list[TokenRule], *, name: str = "rules") -> None:
        if not rules:
            raise ValueError("at least one rule is required")
        self.name = name
        self._rules = list(rules)

    @property
    def rules(self) -> tuple[TokenRule, ...]:
        return tuple(self._rules)

    def scan(self, source: str) -> tuple[list[Token], list[Diagnostic]]:
        tokens: list[Token] = []
        diagnostics: list[Diagnostic] = []
        pos = 0
        end = len(source)

        while pos < end:
            best: TokenRule | None = None
            best_len = 0
            for rule in self._rules:
                match = rule.regex.match(source, pos)
                if match is None:
                    continue
                length = match.end() - pos
                if length == 0:
                    continue
                if length > best_len or (length == best_len and best is not None and rule.priority > best.priority):
                    best, best_len = rule, length

            if best is None:
                diagnostics.append(Diagnostic(f"unexpected character {source[pos]!r}", pos))
                pos += 1
                continue

            if not best.skip:
                tokens.append(Token(best.kind, source[pos : pos + best_len], pos))
            pos += best_len

        return tokens, diagnostics
