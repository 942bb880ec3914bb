from __future__ import annotations

from spindraw.engine.core.mesh import Mesh

from .registry import shape

DEFAULT_HALF_EXTENT = 100.0


@shape("square", position=(300.0, 300.0), order=0)
def make_square_mesh(half_extent: float = DEFAULT_HALF_EXTENT) -> Mesh:
    """原点中心の正方形（4 頂点）を生成します。

    頂点順は 左上 → 右上 → 右下 → 左下（Y 下向きの画面座標で時計回り）。

    引数:
        half_extent: 中心から辺までの距離。既定 100（200×200 の正方形）。
    """
    h = float(half_extent)
    if not h > 0.0:
        raise ValueError(f"half_extent must be > 0, got {half_extent}")
    return Mesh([(-h, -h), (h, -h), (h, h), (-h, h)])


make_square_mesh.__param_meta__ = {
    "half_extent": {"type": "number"},
}
