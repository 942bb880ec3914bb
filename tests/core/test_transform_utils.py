from __future__ import annotations

import numpy as np

from spindraw.engine.core.mesh import Mesh
from spindraw.engine.core.transform_utils import rotate, to_world_space, transform_combined
from spindraw.shapes import make_square_mesh


def test_rotate_preserves_count_and_distance(triangle_mesh: Mesh) -> None:
    out = rotate(triangle_mesh, 37.5)
    assert len(out) == len(triangle_mesh)
    np.testing.assert_allclose(out.radii(), triangle_mesh.radii(), rtol=1e-12)


def test_rotate_zero_is_identity(triangle_mesh: Mesh) -> None:
    np.testing.assert_allclose(rotate(triangle_mesh, 0.0).as_array(), triangle_mesh.as_array())


def test_rotate_composes(triangle_mesh: Mesh) -> None:
    left = rotate(rotate(triangle_mesh, 20.0), 70.0)
    right = rotate(triangle_mesh, 90.0)
    np.testing.assert_allclose(left.as_array(), right.as_array(), atol=1e-9)


def test_rotate_is_clockwise_on_screen() -> None:
    # Y 下向きでは +X から +Y（画面の下方向）へ回る
    out = rotate(Mesh([(10.0, 0.0)]), 90.0)
    np.testing.assert_allclose(out.as_array(), [[0.0, 10.0]], atol=1e-12)


def test_to_world_space_identity_and_composition(triangle_mesh: Mesh) -> None:
    np.testing.assert_array_equal(
        to_world_space(triangle_mesh, (0.0, 0.0)).as_array(), triangle_mesh.as_array()
    )
    left = to_world_space(to_world_space(triangle_mesh, (3.0, -2.0)), (10.0, 7.5))
    right = to_world_space(triangle_mesh, (13.0, 5.5))
    np.testing.assert_allclose(left.as_array(), right.as_array())


def test_to_world_space_does_not_mutate_inputs(triangle_mesh: Mesh) -> None:
    before = triangle_mesh.as_array()
    pos = [5.0, 5.0]
    to_world_space(triangle_mesh, pos)
    assert pos == [5.0, 5.0]
    np.testing.assert_array_equal(triangle_mesh.as_array(), before)


def test_square_rotated_90_then_translated_matches_shifted_vertex_order() -> None:
    square = make_square_mesh()
    spun = to_world_space(rotate(square, 90.0), (300.0, 300.0))
    still = to_world_space(square, (300.0, 300.0))
    # 90° 回転は頂点を 1 つずらした並びと一致（自身の中心で回る）
    np.testing.assert_allclose(
        spun.as_array(), np.roll(still.as_array(), -1, axis=0), atol=1e-9
    )
    assert still.centroid() == (300.0, 300.0)
    np.testing.assert_allclose(spun.centroid(), (300.0, 300.0), atol=1e-9)


def test_transform_combined_rotates_in_local_space_first() -> None:
    square = make_square_mesh()
    out = transform_combined(square, 45.0, (300.0, 300.0))
    np.testing.assert_allclose(out.centroid(), (300.0, 300.0), atol=1e-9)
    # 逆順（配置してから回転）ではワールド原点回りに公転してしまう
    wrong = rotate(to_world_space(square, (300.0, 300.0)), 45.0)
    assert not np.allclose(wrong.centroid(), (300.0, 300.0))
