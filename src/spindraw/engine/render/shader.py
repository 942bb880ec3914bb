"""
どこで: `engine.render` のシェーダ定義。
何を: 2D 線分用の最小 GLSL プログラム（正射影 + 単色）を ModernGL で生成。
なぜ: シェーダ文字列を描画ロジックから分離し、LineSurface を読みやすく保つため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 frag_color;
void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """`moderngl.Context` から線描画用プログラムを生成する。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)


__all__ = ["Shader", "VERTEX_SHADER", "FRAGMENT_SHADER"]
