"""Command-line entry point that writes the TEXT entities of DXF files as CSV."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from dxfcriber.columns import parse_column_specs
from dxfcriber.config import ConfigurationError, configure_logging
from dxfcriber.csv_output import write_table
from dxfcriber.inputs import expand_inputs
from dxfcriber.loader import DocumentLoadError
from dxfcriber.filters import validate_bounds
from dxfcriber.models import Column, LabelFilter
from dxfcriber.normalize import validate_step
from dxfcriber.pipeline import Loader, extract_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class RunOptions:
    """Validated settings derived from parsed CLI arguments."""

    files: tuple[str, ...]
    columns: tuple[Column, ...]
    quantize_step: float | None
    label_filter: LabelFilter
    output_path: Path | None


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dxfcriber",
        description="dxfcriber extracts TEXT entities from DXF files and outputs their data to a CSV file.",
    )
    parser.add_argument("inputs", nargs="+", metavar="input_file", help="Input DXF files (glob patterns allowed).")
    parser.add_argument(
        "-c",
        "--column",
        dest="columns",
        action="append",
        default=[],
        metavar="NAME,MIN[,MAX]",
        help="Column name, min position X to group, and max position X to group separated by comma (,).",
    )
    parser.add_argument("-r", "--round", dest="round", type=float, default=None, help="Multiple to round positional numbers.")
    parser.add_argument("--xmin", type=float, default=None, help="Minimum position X to extract TEXT entities.")
    parser.add_argument("--xmax", type=float, default=None, help="Maximum position X to extract TEXT entities.")
    parser.add_argument("--ymin", type=float, default=None, help="Minimum position Y to extract TEXT entities.")
    parser.add_argument("--ymax", type=float, default=None, help="Maximum position Y to extract TEXT entities.")
    parser.add_argument("--color", type=int, default=None, help="Index color number to extract TEXT entities.")
    parser.add_argument("--layer", default=None, help="Layer name to extract TEXT entities.")
    parser.add_argument("-o", "--output", dest="output", default=None, help="Write CSV here instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser


def build_options(args: argparse.Namespace, files: Sequence[str]) -> RunOptions:
    """Validate ``args``; raises :class:`ConfigurationError` on bad values."""

    return RunOptions(
        files=tuple(files),
        columns=tuple(parse_column_specs(args.columns)),
        quantize_step=validate_step(args.round),
        label_filter=validate_bounds(
            LabelFilter(
                x_min=args.xmin,
                x_max=args.xmax,
                y_min=args.ymin,
                y_max=args.ymax,
                color=args.color,
                layer=args.layer,
            )
        ),
        output_path=Path(args.output) if args.output else None,
    )


def run(options: RunOptions, *, stdout: TextIO | None = None, loader: Loader | None = None) -> int:
    table = extract_table(
        options.files,
        columns=options.columns,
        quantize_step=options.quantize_step,
        label_filter=options.label_filter,
        loader=loader,
    )
    if options.output_path is not None:
        options.output_path.parent.mkdir(parents=True, exist_ok=True)
        with options.output_path.open("w", newline="", encoding="utf-8") as fh:
            write_table(table, fh)
        logger.info("Wrote %d rows to %s", len(table.rows), options.output_path)
    else:
        write_table(table, stdout or sys.stdout)
    return EXIT_OK


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    loader: Loader | None = None,
    stdout: TextIO | None = None,
) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    files: List[str] = expand_inputs(args.inputs)
    if not files:
        parser.error("No input file")
    try:
        options = build_options(args, files)
    except ConfigurationError as exc:
        parser.error(str(exc))

    try:
        return run(options, stdout=stdout, loader=loader)
    except DocumentLoadError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    except OSError as exc:
        logger.error("Cannot write %s: %s", options.output_path or "stdout", exc)
        return EXIT_FAILURE


__all__ = ["RunOptions", "build_arg_parser", "build_options", "main", "run"]
