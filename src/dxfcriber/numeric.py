"""Numeric parsing and formatting helpers."""

from __future__ import annotations

import math
from typing import Any

__all__ = [
    "coerce_float",
    "format_number",
]


def coerce_float(value: Any) -> float | None:
    """Strict conversion to a finite ``float``; ``None`` when not possible."""

    if value is None:
        return None

    if isinstance(value, (int, float)):
        coerced = float(value)
        return coerced if math.isfinite(coerced) else None

    text = str(value).strip()
    if not text:
        return None

    try:
        coerced = float(text)
    except ValueError:
        return None

    return coerced if math.isfinite(coerced) else None


def format_number(value: float) -> str:
    """Render ``value`` in its shortest natural text form.

    Integral values drop the trailing ``.0`` (``5.0`` -> ``"5"``) and
    negative zero renders as ``"0"``.
    """

    number = float(value)
    if number == 0.0:
        return "0"
    text = repr(number)
    if text.endswith(".0"):
        text = text[:-2]
    return text
