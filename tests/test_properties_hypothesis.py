import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from spindraw.engine.core.mesh import Mesh
from spindraw.engine.core.shape_state import advance_angle
from spindraw.engine.core.transform_utils import rotate, to_world_space

coord = st.floats(-1000, 1000, allow_nan=False, allow_infinity=False)
angle = st.floats(-720, 720, allow_nan=False, allow_infinity=False)
meshes = st.lists(st.tuples(coord, coord), min_size=1, max_size=12).map(Mesh)


@given(m=meshes, theta=angle)
def test_rotate_preserves_count_and_radii(m, theta):
    out = rotate(m, theta)
    assert len(out) == len(m)
    np.testing.assert_allclose(out.radii(), m.radii(), rtol=1e-9, atol=1e-9)


@given(m=meshes, a=angle, b=angle)
def test_rotate_composition(m, a, b):
    left = rotate(rotate(m, a), b).as_array()
    right = rotate(m, a + b).as_array()
    np.testing.assert_allclose(left, right, rtol=1e-9, atol=1e-7)


@given(m=meshes, dx1=coord, dy1=coord, dx2=coord, dy2=coord)
def test_translate_composition(m, dx1, dy1, dx2, dy2):
    left = to_world_space(to_world_space(m, (dx1, dy1)), (dx2, dy2)).as_array()
    right = to_world_space(m, (dx1 + dx2, dy1 + dy2)).as_array()
    np.testing.assert_allclose(left, right, rtol=1e-9, atol=1e-9)


@given(
    k=st.floats(min_value=1e-3, max_value=359.5, allow_nan=False),
    n=st.integers(min_value=1, max_value=400),
)
def test_single_wrap_accumulator_stays_in_range(k, n):
    a = 0.0
    for _ in range(n):
        a = advance_angle(a, k)
        assert 0.0 <= a < 360.0
