"""lexbench package initialisation."""

__all__ = [
    "benchmarks",
    "scanning",
    "shared",
]
