"""Scanning engines used as benchmark workloads."""

from .base import Diagnostic, Scanner, Token, count_tokens
from .loader import load_scanner
from .presets import PRESETS, javascript_scanner, json_scanner, scaling_scanner, words_scanner
from .rules import RuleScanner, TokenRule

__all__ = [
	"Diagnostic",
	"Scanner",
	"Token",
	"count_tokens",
	"load_scanner",
	"PRESETS",
	"javascript_scanner",
	"json_scanner",
	"scaling_scanner",
	"words_scanner",
	"RuleScanner",
	"TokenRule",
]
