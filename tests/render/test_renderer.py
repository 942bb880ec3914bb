from __future__ import annotations

import numpy as np
import pytest

from spindraw.engine.core.mesh import Mesh
from spindraw.engine.render.recording import RecordingSurface
from spindraw.engine.render.renderer import InvalidArgumentError, render_mesh


def _edges(segments) -> set[frozenset]:
    return {frozenset((a, b)) for a, b in segments if a != b}


def test_render_mesh_emits_closed_outline(surface: RecordingSurface, square_mesh: Mesh) -> None:
    render_mesh(surface, square_mesh)
    names = surface.call_names()
    assert names[0] == "begin_path"
    assert names[-2:] == ["close_path", "stroke"]
    assert names.count("move_to") == 4 and names.count("line_to") == 4
    expected = {
        frozenset(((-100.0, -100.0), (100.0, -100.0))),
        frozenset(((100.0, -100.0), (100.0, 100.0))),
        frozenset(((100.0, 100.0), (-100.0, 100.0))),
        frozenset(((-100.0, 100.0), (-100.0, -100.0))),
    }
    assert _edges(surface.segments) == expected


def test_render_mesh_closing_edge_goes_back_to_first_vertex(surface: RecordingSurface) -> None:
    render_mesh(surface, [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])
    last_line = [args for name, args in surface.calls if name == "line_to"][-1]
    assert last_line == (0.0, 0.0)


def test_render_mesh_accepts_raw_sequences(surface: RecordingSurface) -> None:
    render_mesh(surface, np.array([[1.0, 2.0], [3.0, 4.0]]))
    render_mesh(surface, ((5, 6), (7, 8), (9, 1)))
    assert surface.strokes == 2


def test_render_mesh_does_not_clear(surface: RecordingSurface, square_mesh: Mesh) -> None:
    render_mesh(surface, square_mesh)
    render_mesh(surface, square_mesh.translate(300.0, 300.0))
    assert "clear_rect" not in surface.call_names()
    assert len(_edges(surface.segments)) == 8


@pytest.mark.parametrize(
    "bad",
    [5, 3.14, None, "square", b"xy", {"x": 1}, [], [[1.0, 2.0, 3.0]], [1.0, 2.0], [["a", "b"]]],
)
def test_render_mesh_rejects_invalid_mesh(surface: RecordingSurface, bad) -> None:
    with pytest.raises(InvalidArgumentError):
        render_mesh(surface, bad)
    # 描画先には一切触れない
    assert surface.calls == []


def test_invalid_argument_error_is_type_error() -> None:
    assert issubclass(InvalidArgumentError, TypeError)
