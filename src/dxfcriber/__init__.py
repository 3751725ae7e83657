"""Turn positioned DXF TEXT labels into a CSV table."""
from __future__ import annotations

from .columns import auto_columns, parse_column_spec, resolve_columns
from .config import ConfigurationError
from .filters import passes_filter
from .loader import DocumentLoadError, load_labels
from .models import Column, LabelFilter, LabelPoint, OutputTable
from .normalize import quantize, quantize_point
from .pipeline import extract_table, scan_points
from .table import build_table

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ConfigurationError",
    "DocumentLoadError",
    "LabelFilter",
    "LabelPoint",
    "OutputTable",
    "auto_columns",
    "build_table",
    "extract_table",
    "load_labels",
    "parse_column_spec",
    "passes_filter",
    "quantize",
    "quantize_point",
    "resolve_columns",
    "scan_points",
]
