from __future__ import annotations

import numpy as np

from spindraw.engine.core.mesh import Mesh

from .registry import shape

MIN_SAMPLES = 3


def _circle_vertices(radius: float, samples: int) -> np.ndarray:
    """円周上の等間隔サンプルを返します。

    頂点 i は角度 i * (360 / samples) 度（+X 軸基準、`Mesh.rotate` と同じ向き）。
    """
    angles = np.deg2rad(np.arange(samples, dtype=np.float64) * (360.0 / samples))
    return np.stack([radius * np.cos(angles), radius * np.sin(angles)], axis=1)


@shape("circle", position=(100.0, 300.0), order=1)
def make_circle_mesh(radius: float = 50.0, samples: int = 30) -> Mesh:
    """原点中心の円を `samples` 角形で近似したメッシュを生成します。

    引数:
        radius: 半径（> 0）。
        samples: 頂点数（3 以上の整数）。2 以下は線分/点に退化するため拒否する。
    """
    if isinstance(samples, bool) or int(samples) != samples:
        raise ValueError(f"samples must be an integer, got {samples!r}")
    n = int(samples)
    if n < MIN_SAMPLES:
        raise ValueError(f"samples must be >= {MIN_SAMPLES}, got {n}")
    r = float(radius)
    if not r > 0.0:
        raise ValueError(f"radius must be > 0, got {radius}")
    return Mesh(_circle_vertices(r, n))


make_circle_mesh.__param_meta__ = {
    "radius": {"type": "number"},
    "samples": {"type": "integer", "min": MIN_SAMPLES},
}
