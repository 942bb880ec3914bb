from __future__ import annotations

import pytest

from spindraw.api.scene import SceneConfig, build_scene


def test_default_scene_layout() -> None:
    square, circle = build_scene()
    assert (square.name, circle.name) == ("square", "circle")
    assert square.position == (300.0, 300.0)
    assert circle.position == (100.0, 300.0)
    assert len(square.mesh) == 4 and len(circle.mesh) == 30
    assert square.angle == 0.0 and circle.angle == 0.0
    assert float(circle.mesh.radii().max()) == pytest.approx(50.0)


def test_scene_from_mapping_partial_override() -> None:
    cfg = SceneConfig.from_mapping({"circle": {"samples": 12, "position": [10, 20]}})
    assert [s.name for s in cfg.shapes] == ["square", "circle"]
    assert cfg.get("circle").params == {"radius": 50.0, "samples": 12}
    assert cfg.get("circle").position == (10.0, 20.0)
    assert cfg.get("square").params == {"half_extent": 100.0}
    _square, circle = build_scene(cfg)
    assert len(circle.mesh) == 12


def test_fractional_sample_count_is_rejected_not_truncated() -> None:
    with pytest.raises(ValueError, match="samples"):
        SceneConfig.from_mapping({"circle": {"samples": 30.9}})


@pytest.mark.parametrize(
    "bad",
    [
        {"square": {"position": 5}},
        {"square": {"half_extent": "big"}},
        {"circle": {"position": [1, 2, 3]}},
        {"circle": "round"},
        {"triangle": {"side": 3}},
        ["square"],
    ],
)
def test_scene_from_mapping_rejects_bad_values(bad) -> None:
    with pytest.raises(ValueError):
        SceneConfig.from_mapping(bad)


def test_build_scene_propagates_mesh_validation() -> None:
    with pytest.raises(ValueError):
        build_scene(SceneConfig.from_mapping({"square": {"half_extent": 0}}))


def test_get_unknown_shape_config() -> None:
    with pytest.raises(KeyError):
        SceneConfig.default().get("hexagon")
