"""Plain data records passed between the dxfcriber pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

# --------------------------- public data model ---------------------------


@dataclass(frozen=True)
class LabelPoint:
    """One TEXT entity found in a drawing."""

    source_file: str
    x: float
    y: float
    value: str
    color: int | None = None
    layer: str | None = None


@dataclass(frozen=True)
class Column:
    """Named inclusive X range. ``x_min > x_max`` never matches anything."""

    name: str
    x_min: float
    x_max: float

    def contains(self, x: float) -> bool:
        return self.x_min <= x <= self.x_max


@dataclass(frozen=True)
class LabelFilter:
    """Optional constraints on a label; ``None`` means unconstrained."""

    x_min: float | None = None
    x_max: float | None = None
    y_min: float | None = None
    y_max: float | None = None
    color: int | None = None
    layer: str | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.x_min, self.x_max, self.y_min, self.y_max, self.color, self.layer)
        )


# (source_file, y) identifies one output row
RowKey = Tuple[str, float]
# raw x -> label text for one row
RowBucket = Dict[float, str]

FILENAME_HEADER = "filename"
Y_HEADER = "y"


@dataclass(frozen=True)
class OutputTable:
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    @property
    def column_names(self) -> Tuple[str, ...]:
        return self.header[2:]

    def __len__(self) -> int:
        return len(self.rows)


__all__ = [
    "Column",
    "FILENAME_HEADER",
    "LabelFilter",
    "LabelPoint",
    "OutputTable",
    "RowBucket",
    "RowKey",
    "Y_HEADER",
]
