"""Expand command-line file arguments into a flat list of paths."""

from __future__ import annotations

import glob
import logging
import os
from typing import Iterable, List

logger = logging.getLogger(__name__)


def expand_pattern(pattern: str) -> List[str]:
    """Return the files matching ``pattern`` (``**`` allowed), sorted."""

    matches = glob.glob(pattern, recursive=True)
    return sorted(path for path in matches if os.path.isfile(path))


def expand_inputs(patterns: Iterable[str]) -> List[str]:
    """Expand every pattern in order and drop repeated paths.

    An empty result is left for the caller to report as a usage error.
    """

    files: List[str] = []
    seen: set[str] = set()
    for pattern in patterns:
        matches = expand_pattern(pattern)
        if not matches:
            logger.warning("No files match %s", pattern)
            continue
        for path in matches:
            if path in seen:
                continue
            seen.add(path)
            files.append(path)
    return files


__all__ = ["expand_inputs", "expand_pattern"]
