"""Resolution of externally provided scanning engines."""

from __future__ import annotations

import importlib

from lexbench.shared.errors import ScannerLoadError

from .base import Scanner
from .presets import PRESETS


def load_scanner(reference: str) -> Scanner:
    """Returns a scanner for a preset name or a ``module:attribute`` path.

    The attribute may be a scanner instance or a zero-argument factory
    (including a class) returning one.
    """

    reference = reference.strip()
    if reference in PRESETS:
        return PRESETS[reference]()

    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ScannerLoadError(f"expected a preset name or 'module:attribute', got {reference!r}")

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ScannerLoadError(f"cannot import {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ScannerLoadError(f"{module_name!r} has no attribute {attr_path!r}") from exc

    if isinstance(target, type) or (callable(target) and not hasattr(target, "scan")):
        try:
            target = target()
        except TypeError as exc:
            raise ScannerLoadError(f"cannot create a scanner from {reference!r}: {exc}") from exc
    if not callable(getattr(target, "scan", None)):
        raise ScannerLoadError(f"{reference!r} does not provide a scan(source) method")
    return target  # type: ignore[return-value]
