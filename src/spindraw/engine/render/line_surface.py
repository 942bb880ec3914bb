"""
どこで: `engine.render` の GL 描画先。
何を: `Surface` を ModernGL 上に実装。ストロークされた線分をフレーム単位で蓄積し、
      `draw()` で VBO へ転送して `LINES` として描画する。
なぜ: アニメーションのコアは Canvas 風のパス API だけを使い、GPU 転送は描画コールバック側に
      閉じ込めるため。

使用例:
    surface = LineSurface(mgl_ctx, width=600, height=600, projection_matrix=proj)
    window.add_draw_callback(surface.draw)
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from .line_mesh import LineMesh
from .path import PathBuilder, Segment, covers, segment_inside
from .shader import Shader

logger = logging.getLogger(__name__)


class LineSurface:
    """ModernGL の線描画先（左上原点・Y 下向きのピクセル座標）。"""

    def __init__(
        self,
        mgl_context: Any,
        *,
        width: int,
        height: int,
        projection_matrix: np.ndarray,
        line_color: Sequence[float] = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        self.ctx = mgl_context
        self.width = int(width)
        self.height = int(height)
        self.program = Shader.create_shader(mgl_context)
        self.program["projection"].write(np.asarray(projection_matrix, dtype="f4").tobytes())
        self.set_line_color(line_color)
        self.gpu = LineMesh(ctx=mgl_context, program=self.program)
        self._path = PathBuilder()
        self._segments: list[Segment] = []
        self._dirty = True

    # ---- Surface ----
    def begin_path(self) -> None:
        self._path.begin()

    def move_to(self, x: float, y: float) -> None:
        self._path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.line_to(x, y)

    def close_path(self) -> None:
        self._path.close()

    def stroke(self) -> None:
        self._segments.extend(self._path.segments)
        self._dirty = True

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        if covers(x, y, w, h, self.width, self.height):
            self._segments = []
        else:
            self._segments = [s for s in self._segments if not segment_inside(s, x, y, w, h)]
        self._dirty = True

    # ---- 描画 ----
    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def vertices(self) -> np.ndarray:
        """確定済み線分を (2K, 2) float32 の端点列として返す。"""
        if not self._segments:
            return np.empty((0, 2), dtype=np.float32)
        return np.asarray(self._segments, dtype=np.float32).reshape(-1, 2)

    def draw(self) -> None:
        """変更があれば VBO を更新し、線分を描画する（`on_draw` から呼ぶ）。"""
        if self._dirty:
            self.gpu.upload(self.vertices())
            self._dirty = False
        self.gpu.render()

    def set_line_color(self, rgba: Sequence[float]) -> None:
        r, g, b, a = (float(v) for v in rgba)
        self.program["color"].value = (r, g, b, a)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()
        self.program.release()


__all__ = ["LineSurface"]
