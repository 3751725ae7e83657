"""Run the scan and tabulation stages over a list of drawing files.

Every file is loaded, quantized and filtered before anything else
happens; auto-derived columns and row order depend on the complete
point set, so the reduction only runs once the scan is done.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Sequence, Tuple

from dxfcriber import loader as _loader
from dxfcriber.columns import resolve_columns
from dxfcriber.filters import passes_filter
from dxfcriber.models import Column, LabelFilter, LabelPoint, OutputTable
from dxfcriber.normalize import quantize_point
from dxfcriber.table import build_table

logger = logging.getLogger(__name__)

Loader = Callable[[str], Iterable[LabelPoint]]


def scan_points(
    files: Sequence[str],
    *,
    quantize_step: float | None = None,
    label_filter: LabelFilter | None = None,
    loader: Loader | None = None,
) -> Tuple[LabelPoint, ...]:
    """Load every file and keep the quantized points that pass the filter.

    A loader failure propagates and aborts the scan.
    """

    load = loader or _loader.load_labels
    kept: List[LabelPoint] = []
    for path in files:
        seen = 0
        before = len(kept)
        for point in load(path):
            seen += 1
            point = quantize_point(point, quantize_step)
            if passes_filter(point, label_filter):
                kept.append(point)
        logger.info("%s: %d labels, %d kept", path, seen, len(kept) - before)
    return tuple(kept)


def extract_table(
    files: Sequence[str],
    *,
    columns: Sequence[Column] | None = None,
    quantize_step: float | None = None,
    label_filter: LabelFilter | None = None,
    loader: Loader | None = None,
) -> OutputTable:
    """Run the full transform over ``files`` and return the table."""

    points = scan_points(
        files,
        quantize_step=quantize_step,
        label_filter=label_filter,
        loader=loader,
    )
    resolved = resolve_columns(columns, points)
    table = build_table(points, resolved)
    logger.debug(
        "Resolved %d columns (%s); %d rows",
        len(resolved),
        "explicit" if columns else "auto",
        len(table.rows),
    )
    return table


__all__ = ["Loader", "extract_table", "scan_points"]
