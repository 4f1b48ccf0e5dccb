"""Human-readable renderings of durations, sizes and rates."""

from __future__ import annotations


def format_time(seconds: float) -> str:
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.1f}μs"
    if seconds < 1.0:
        return f"{seconds * 1_000:.1f}ms"
    return f"{seconds:.3f}s"


def format_number(num: float) -> str:
    if num >= 1_000_000:
        return f"{num / 1_000_000:.2f}M"
    if num >= 1_000:
        return f"{num / 1_000:.2f}K"
    return f"{num:.1f}"


def format_bytes(num_bytes: int) -> str:
    # Decimal units; negative deltas keep their sign in the plain byte form.
    if num_bytes >= 1_000_000_000:
        return f"{num_bytes / 1_000_000_000:.2f}GB"
    if num_bytes >= 1_000_000:
        return f"{num_bytes / 1_000_000:.2f}MB"
    if num_bytes >= 1_000:
        return f"{num_bytes / 1_000:.2f}KB"
    return f"{num_bytes}B"
