"""
どこで: `engine.render` の高レベル描画。
何を: 頂点列を閉じた多角形の輪郭として `Surface` にストロークする `render_mesh`。
なぜ: メッシュ→描画命令の変換を一箇所に集約し、描画先の種類に依存しないため。
"""

from __future__ import annotations

import numpy as np

from spindraw.engine.core.mesh import Mesh

from .surface import Surface


class InvalidArgumentError(TypeError):
    """描画に渡された頂点列が不正（非シーケンス/形状不一致/空）な場合に送出される。

    上流のプログラミングエラーを示すため、呼び出し側では回復しない。
    """


def _coerce_vertices(mesh: object) -> np.ndarray:
    """`Mesh` または (N, 2) の点列を読み取り専用の配列として返す。"""
    if isinstance(mesh, Mesh):
        return mesh.as_array(copy=False)
    if isinstance(mesh, (str, bytes)) or not isinstance(mesh, (list, tuple, np.ndarray)):
        raise InvalidArgumentError(f"invalid type (mesh): {type(mesh).__name__}")
    try:
        return Mesh.from_points(mesh).as_array(copy=False)
    except ValueError as e:
        raise InvalidArgumentError(f"invalid mesh: {e}") from e


def render_mesh(surface: Surface, mesh: Mesh | object) -> None:
    """頂点列を閉じた輪郭として描画する。

    各頂点 i から i+1 へ（最後は最初へ）線分を引き、1 本のパスとしてストロークする。
    描画先のクリアは行わない。

    例外:
    - InvalidArgumentError: `mesh` が有効な頂点列でない場合（描画先には触れない）。
    """
    verts = _coerce_vertices(mesh)
    n = verts.shape[0]
    surface.begin_path()
    for i in range(n):
        x1, y1 = verts[i]
        x2, y2 = verts[(i + 1) % n]
        surface.move_to(float(x1), float(y1))
        surface.line_to(float(x2), float(y2))
    surface.close_path()
    surface.stroke()


__all__ = ["render_mesh", "InvalidArgumentError"]
