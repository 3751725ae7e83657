"""Coordinate quantization."""

from __future__ import annotations

import dataclasses
import math

from dxfcriber.config import ConfigurationError
from dxfcriber.models import LabelPoint

SNAP_REL_TOL = 1e-9
SNAP_ABS_TOL = 1e-12


def validate_step(step: float | None) -> float | None:
    """Return ``step`` if it is usable as a quantization step.

    Raises :class:`ConfigurationError` for zero, negative or non-finite
    values. ``None`` disables quantization and is returned unchanged.
    """

    if step is None:
        return None
    try:
        value = float(step)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Quantization step must be a number, got {step!r}") from exc
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(f"Quantization step must be a positive number, got {step!r}")
    return value


def quantize(value: float, step: float | None) -> float:
    """Truncate ``value`` toward zero to a multiple of ``step``."""

    if step is None:
        return value
    ratio = value / step
    # on-grid values can divide to 2.9999999999999996; snap them first
    nearest = round(ratio)
    if math.isclose(ratio, nearest, rel_tol=SNAP_REL_TOL, abs_tol=SNAP_ABS_TOL):
        ratio = nearest
    # float() keeps -0.0 out: math.trunc(-0.3) is the int 0
    return float(math.trunc(ratio)) * step


def quantize_point(point: LabelPoint, step: float | None) -> LabelPoint:
    if step is None:
        return point
    return dataclasses.replace(point, x=quantize(point.x, step), y=quantize(point.y, step))


__all__ = ["quantize", "quantize_point", "validate_step"]
