"""Interface of the scanning engine exercised by the benchmarks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    text: str
    offset: int


@dataclass(frozen=True, slots=True)
class Diagnostic:
    message: str
    offset: int


class Scanner(Protocol):
    """Minimal interface for scanning engines under measurement."""

    def scan(self, source: str) -> tuple[Sequence[Token], Sequence[Diagnostic]]:
        """Splits ``source`` into tokens, reporting unrecognised input."""


def count_tokens(scanner: Scanner, source: str) -> int:
    tokens, _ = scanner.scan(source)
    return len(tokens)
