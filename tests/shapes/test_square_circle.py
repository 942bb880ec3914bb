"""
どこで: tests（shapes/square, shapes/circle）。
何を: 正方形の頂点順と円のサンプル配置（個数/半径/等角度）を確認。
なぜ: 生成直後（回転 0）の向きが回転変換と同じ角度規約に揃っていることを保証するため。
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from spindraw.shapes import make_circle_mesh, make_square_mesh


def test_square_default_corners_clockwise_from_top_left() -> None:
    m = make_square_mesh()
    assert list(m) == [(-100.0, -100.0), (100.0, -100.0), (100.0, 100.0), (-100.0, 100.0)]


def test_square_half_extent_and_validation() -> None:
    m = make_square_mesh(half_extent=2.5)
    assert m[2] == (2.5, 2.5)
    with pytest.raises(ValueError):
        make_square_mesh(half_extent=0.0)


@pytest.mark.parametrize("radius,samples", [(50.0, 30), (1.0, 3), (12.5, 7), (200.0, 360)])
def test_circle_count_radius_and_even_spacing(radius: float, samples: int) -> None:
    m = make_circle_mesh(radius, samples)
    assert len(m) == samples
    np.testing.assert_allclose(m.radii(), radius, rtol=1e-12)
    pts = m.as_array()
    angles = np.rad2deg(np.arctan2(pts[:, 1], pts[:, 0]))
    steps = np.mod(np.diff(np.append(angles, angles[0])), 360.0)
    np.testing.assert_allclose(steps, 360.0 / samples, atol=1e-9)


def test_circle_first_vertex_on_positive_x_axis() -> None:
    m = make_circle_mesh(50.0, 30)
    assert m[0] == (50.0, 0.0)
    x, y = m[1]
    assert math.isclose(x, 50.0 * math.cos(math.radians(12.0)))
    assert math.isclose(y, 50.0 * math.sin(math.radians(12.0)))


def test_circle_is_deterministic() -> None:
    a = make_circle_mesh(50.0, 30).as_array()
    b = make_circle_mesh(50.0, 30).as_array()
    assert a.tobytes() == b.tobytes()


@pytest.mark.parametrize("samples", [0, 1, 2, -4, 3.5, "30"])
def test_circle_rejects_bad_samples(samples) -> None:
    with pytest.raises(ValueError):
        make_circle_mesh(10.0, samples)


@pytest.mark.parametrize("radius", [0.0, -1.0])
def test_circle_rejects_non_positive_radius(radius: float) -> None:
    with pytest.raises(ValueError):
        make_circle_mesh(radius, 12)
