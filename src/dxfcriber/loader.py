r"""
loader.py
=========
DXF → LabelPoint reader.

Purpose:
    Open a DXF file with ezdxf and turn every modelspace TEXT entity into a
    :class:`~dxfcriber.models.LabelPoint` (insert point, raw text, ACI color
    index and layer name).

Key behaviors:
    - Files with structure errors get one retry through ``ezdxf.recover``.
    - Anything that still cannot be decoded raises :class:`DocumentLoadError`;
      callers abort the run instead of skipping the file.
    - Only TEXT is read. MTEXT, INSERT blocks and OCS transforms are left alone.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, List

import ezdxf
from ezdxf import recover
from ezdxf.lldxf.const import DXFError, DXFStructureError

from dxfcriber.models import LabelPoint

logger = logging.getLogger(__name__)


class DocumentLoadError(RuntimeError):
    """Raised when a drawing file cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot load {path}: {reason}")
        self.path = str(path)
        self.reason = reason


def open_document(path: str | Path) -> Any:
    """Return the ezdxf document for ``path``.

    Tries ``ezdxf.readfile`` first and falls back to ``recover.readfile``
    when the DXF has structure errors (e.g. missing ENDSEC tags).
    """

    filename = str(path)
    try:
        return ezdxf.readfile(filename)
    except DXFStructureError as exc:
        logger.warning("DXF structure error in %s, trying recovery mode: %s", filename, exc)
        try:
            doc, auditor = recover.readfile(filename)
        except (OSError, DXFError) as recover_exc:
            raise DocumentLoadError(filename, str(recover_exc)) from recover_exc
        if auditor is not None and auditor.has_errors:
            logger.warning("%s recovered with %d errors", filename, len(auditor.errors))
        return doc
    except (OSError, DXFError) as exc:
        raise DocumentLoadError(filename, str(exc)) from exc


def iter_text_labels(doc: Any, source_file: str) -> Iterator[LabelPoint]:
    """Yield one LabelPoint per TEXT entity in the modelspace of ``doc``."""

    for entity in doc.modelspace().query("TEXT"):
        insert = entity.dxf.insert
        yield LabelPoint(
            source_file=source_file,
            x=float(insert.x),
            y=float(insert.y),
            value=str(entity.dxf.text or ""),
            color=int(entity.dxf.color),
            layer=str(entity.dxf.layer),
        )


def load_labels(path: str | Path) -> List[LabelPoint]:
    """Read ``path`` and return its TEXT labels in entity order."""

    source_file = str(path)
    doc = open_document(source_file)
    labels = list(iter_text_labels(doc, source_file))
    logger.debug("Loaded %d TEXT labels from %s", len(labels), source_file)
    return labels


__all__ = ["DocumentLoadError", "iter_text_labels", "load_labels", "open_document"]
