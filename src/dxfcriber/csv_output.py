"""CSV rendering for :class:`~dxfcriber.models.OutputTable`."""
from __future__ import annotations

import csv
import io
from typing import Any, TextIO

from dxfcriber.models import OutputTable

DEFAULT_DELIMITER = ","
LINE_TERMINATOR = "\n"


def sanitize_csv_cell(value: Any) -> str:
    """Coerce ``value`` to a CSV-safe string representation."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def write_table(table: OutputTable, stream: TextIO, *, delimiter: str = DEFAULT_DELIMITER) -> int:
    """Write the header and rows of ``table`` to ``stream``; return the row count."""

    writer = csv.writer(stream, delimiter=delimiter, lineterminator=LINE_TERMINATOR)
    writer.writerow([sanitize_csv_cell(cell) for cell in table.header])
    for row in table.rows:
        writer.writerow([sanitize_csv_cell(cell) for cell in row])
    return len(table.rows)


def render_csv(table: OutputTable, *, delimiter: str = DEFAULT_DELIMITER) -> str:
    buffer = io.StringIO()
    write_table(table, buffer, delimiter=delimiter)
    return buffer.getvalue()


__all__ = ["DEFAULT_DELIMITER", "LINE_TERMINATOR", "render_csv", "sanitize_csv_cell", "write_table"]
