from __future__ import annotations

import pytest

from spindraw.api import run, run_scene
from spindraw.api.scene import SceneConfig


@pytest.mark.integration
def test_run_scene_init_only_returns_without_window() -> None:
    assert run_scene(init_only=True) is None
    assert run is run_scene


def test_run_scene_init_only_validates_inputs() -> None:
    with pytest.raises(ValueError):
        run_scene(canvas_size=(0, 600), init_only=True)
    with pytest.raises(ValueError):
        run_scene(angle_wrap="spiral", init_only=True)
    with pytest.raises(ValueError):
        run_scene(scene=SceneConfig.from_mapping({"square": {"half_extent": -1}}), init_only=True)
