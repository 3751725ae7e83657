"""Range and attribute predicates over normalized labels."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from dxfcriber.config import ConfigurationError
from dxfcriber.models import LabelFilter, LabelPoint


def passes_filter(point: LabelPoint, label_filter: LabelFilter | None) -> bool:
    """Return ``True`` when ``point`` satisfies every constraint that is set."""

    if label_filter is None:
        return True
    if label_filter.x_min is not None and point.x < label_filter.x_min:
        return False
    if label_filter.x_max is not None and point.x > label_filter.x_max:
        return False
    if label_filter.y_min is not None and point.y < label_filter.y_min:
        return False
    if label_filter.y_max is not None and point.y > label_filter.y_max:
        return False
    if label_filter.color is not None and point.color != label_filter.color:
        return False
    if label_filter.layer is not None and point.layer != label_filter.layer:
        return False
    return True


def validate_bounds(label_filter: LabelFilter) -> LabelFilter:
    """Reject NaN or infinite coordinate bounds."""

    for name in ("x_min", "x_max", "y_min", "y_max"):
        bound = getattr(label_filter, name)
        if bound is not None and not math.isfinite(bound):
            raise ConfigurationError(f"Filter bound {name} must be a finite number, got {bound!r}")
    return label_filter


def filter_points(points: Iterable[LabelPoint], label_filter: LabelFilter | None) -> Iterator[LabelPoint]:
    for point in points:
        if passes_filter(point, label_filter):
            yield point


__all__ = ["filter_points", "passes_filter", "validate_bounds"]
