from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable, List, Sequence, Tuple

import ezdxf
import pytest

from dxfcriber.models import LabelPoint

# (text, x, y) or (text, x, y, {"layer": ..., "color": ...})
TextSpec = Tuple[Any, ...]


def _add_texts(doc, texts: Iterable[TextSpec]) -> None:
    msp = doc.modelspace()
    for spec in texts:
        text, x, y = spec[0], spec[1], spec[2]
        attribs = {"insert": (x, y)}
        if len(spec) > 3:
            attribs.update(spec[3])
        msp.add_text(text, dxfattribs=attribs)


@pytest.fixture
def write_dxf(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that saves a DXF with the given TEXT entities."""

    def _write(name: str, texts: Sequence[TextSpec]) -> Path:
        doc = ezdxf.new()
        _add_texts(doc, texts)
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        doc.saveas(path)
        return path

    return _write


def make_points(source_file: str, rows: Iterable[Tuple[float, float, str]]) -> List[LabelPoint]:
    return [LabelPoint(source_file, float(x), float(y), value) for x, y, value in rows]


@pytest.fixture
def sample_points() -> List[LabelPoint]:
    return make_points("f.dxf", [(10, 5, "A"), (20, 5, "B"), (10, 8, "C")])


@pytest.fixture
def fake_loader() -> Callable[[dict], Callable[[str], List[LabelPoint]]]:
    """Build a loader that serves in-memory labels keyed by path."""

    def _factory(labels_by_path: dict) -> Callable[[str], List[LabelPoint]]:
        calls: List[str] = []

        def _load(path: str) -> List[LabelPoint]:
            calls.append(path)
            return list(labels_by_path[path])

        _load.calls = calls  # type: ignore[attr-defined]
        return _load

    return _factory
