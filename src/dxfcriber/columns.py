"""Column resolution: explicit ``name,min[,max]`` specs or auto-derived X columns."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from dxfcriber.config import ConfigurationError
from dxfcriber.models import Column, LabelPoint
from dxfcriber.numeric import coerce_float, format_number

AUTO_COLUMN_PREFIX = "x="


def parse_column_spec(text: str) -> Column:
    """Parse ``"name,boundary"`` or ``"name,boundary,boundary"``.

    A single boundary produces a one-point column (``x_min == x_max``).
    """

    parts = str(text).split(",")
    if len(parts) not in (2, 3):
        raise ConfigurationError(
            f"Column spec {text!r} must look like NAME,MIN or NAME,MIN,MAX"
        )
    name = parts[0]
    if not name.strip():
        raise ConfigurationError(f"Column spec {text!r} has an empty name")

    bounds: List[float] = []
    for raw in parts[1:]:
        number = coerce_float(raw)
        if number is None:
            raise ConfigurationError(f"Column spec {text!r} has a non-numeric boundary {raw!r}")
        bounds.append(number)

    if len(bounds) == 1:
        return Column(name, bounds[0], bounds[0])
    return Column(name, bounds[0], bounds[1])


def parse_column_specs(specs: Iterable[str] | None) -> List[Column]:
    return [parse_column_spec(spec) for spec in specs or []]


def auto_column(x: float) -> Column:
    return Column(f"{AUTO_COLUMN_PREFIX}{format_number(x)}", x, x)


def auto_columns(points: Iterable[LabelPoint]) -> List[Column]:
    """One single-point column per distinct observed x, ascending."""

    seen: set[float] = set()
    columns: List[Column] = []
    for x in sorted(point.x for point in points):
        if x in seen:
            continue
        seen.add(x)
        columns.append(auto_column(x))
    return columns


def resolve_columns(explicit: Sequence[Column] | None, points: Iterable[LabelPoint]) -> List[Column]:
    """Return the columns for a run.

    Explicit columns win verbatim, duplicates and overlaps included.
    Otherwise columns are derived from the filtered points.
    """

    if explicit:
        return list(explicit)
    return auto_columns(points)


def match_column(columns: Sequence[Column], x: float) -> Optional[int]:
    """Index of the first column whose range contains ``x``."""

    for index, column in enumerate(columns):
        if column.contains(x):
            return index
    return None


__all__ = [
    "AUTO_COLUMN_PREFIX",
    "auto_column",
    "auto_columns",
    "match_column",
    "parse_column_spec",
    "parse_column_specs",
    "resolve_columns",
]
