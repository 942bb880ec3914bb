"""
どこで: `engine.render` の低レベルメッシュ層。
何を: 線分頂点の VBO/VAO の確保・更新・解放を担当し、`LINES` で描画する LineMesh を管理。
なぜ: GPU 転送の詳細を LineSurface から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import moderngl
import numpy as np


class LineMesh:
    """
    線分（2 頂点 1 組）の頂点データを GPU に送り込み、描画する
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期確保量（既定: 64KB）。必要に応じて自動拡張。
        initial_reserve: int = 64 * 1024,
    ):
        """
        ctx: moderngl コンテキスト
        program: `Shader.create_shader` で生成したプログラム（in_vert: vec2）
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = ctx.simple_vertex_array(program, self.vbo, "in_vert")
        self.vertex_count: int = 0

    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったら VBO を再確保し VAO を張り直す"""
        if vbo_size <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve * 2), dynamic=True)
        self.vao = self.ctx.simple_vertex_array(self.program, self.vbo, "in_vert")

    def upload(self, vertices: np.ndarray) -> None:
        """(2K, 2) float32 の線分端点列を GPU へ送る"""
        data = np.ascontiguousarray(vertices, dtype="f4")
        self.vertex_count = int(data.shape[0])
        if self.vertex_count == 0:
            return
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        self.vbo.write(data.tobytes())

    def render(self) -> None:
        if self.vertex_count == 0:
            return
        self.vao.render(moderngl.LINES, vertices=self.vertex_count)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
