"""Row grouping and column projection.

Labels are grouped by ``(source_file, y)``. Each group keeps a bucket of
raw x -> text; a later label at the same x replaces the text but keeps
the bucket position of the first one. Groups are ordered by file name
ascending, then y descending (top of the drawing first), and projected
onto the resolved columns. A row whose cells are all empty is dropped.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

from dxfcriber.columns import match_column
from dxfcriber.models import (
    FILENAME_HEADER,
    Y_HEADER,
    Column,
    LabelPoint,
    OutputTable,
    RowBucket,
    RowKey,
)
from dxfcriber.numeric import format_number


def group_rows(points: Iterable[LabelPoint]) -> Dict[RowKey, RowBucket]:
    buckets: Dict[RowKey, RowBucket] = {}
    for point in points:
        key = (point.source_file, point.y)
        buckets.setdefault(key, {})[point.x] = point.value
    return buckets


def ordered_row_keys(buckets: Mapping[RowKey, RowBucket]) -> List[RowKey]:
    return sorted(buckets, key=lambda key: (key[0], -key[1]))


def project_row(bucket: Mapping[float, str], columns: Sequence[Column]) -> List[str]:
    """Spread one row bucket over ``columns``.

    Each entry goes to the first listed column containing its x. A column
    hit by several entries keeps the first one in bucket order.
    """

    cells: List[str] = [""] * len(columns)
    filled: set[int] = set()
    for x, text in bucket.items():
        index = match_column(columns, x)
        if index is None or index in filled:
            continue
        filled.add(index)
        cells[index] = text
    return cells


def build_header(columns: Sequence[Column]) -> tuple[str, ...]:
    return (FILENAME_HEADER, Y_HEADER, *(column.name for column in columns))


def build_table(points: Iterable[LabelPoint], columns: Sequence[Column]) -> OutputTable:
    buckets = group_rows(points)
    rows: List[tuple[str, ...]] = []
    for key in ordered_row_keys(buckets):
        cells = project_row(buckets[key], columns)
        if all(cell == "" for cell in cells):
            continue
        source_file, y = key
        rows.append((source_file, format_number(y), *cells))
    return OutputTable(header=build_header(columns), rows=tuple(rows))


__all__ = [
    "build_header",
    "build_table",
    "group_rows",
    "ordered_row_keys",
    "project_row",
]
