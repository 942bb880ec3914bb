from __future__ import annotations

import pytest


@pytest.mark.smoke
def test_main_entrypoint_importable() -> None:
    import main

    from spindraw.api import run

    assert main.run is run


@pytest.mark.smoke
def test_public_api_pipeline() -> None:
    from spindraw.api import (
        make_circle_mesh,
        make_square_mesh,
        render_mesh,
        rotate,
        to_world_space,
    )
    from spindraw.engine.render import RecordingSurface

    surface = RecordingSurface()
    for mesh, pos in ((make_square_mesh(), (300.0, 300.0)), (make_circle_mesh(), (100.0, 300.0))):
        render_mesh(surface, to_world_space(rotate(mesh, 45.0), pos))
    assert surface.strokes == 2
