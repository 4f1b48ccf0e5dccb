"""Wrapper for CI jobs that run the gated benchmark suite.

Prefer running:
- `lexbench --suite ci`
"""

from __future__ import annotations

import sys

from lexbench.benchmarks.cli import main


if __name__ == "__main__":
    raise SystemExit(main(["--suite", "ci", *sys.argv[1:]]))
