"""
どこで: `api.sketch_runner.render`
何を: RenderWindow/ModernGL/LineSurface の初期化。
なぜ: `api.sketch` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

import moderngl

from spindraw.common.types import RGBA

from .utils import build_projection


def create_window_and_surface(
    width: int,
    height: int,
    *,
    background: RGBA,
    line_color: RGBA,
):
    """ウィンドウ/ModernGL/LineSurface を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, line_surface)
    """
    from spindraw.engine.core.render_window import RenderWindow
    from spindraw.engine.render.line_surface import LineSurface

    rendering_window = RenderWindow(width, height, bg_color=background)

    # ModernGL コンテキスト（pyglet のウィンドウが current のうちに生成する）
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    line_surface = LineSurface(
        mgl_ctx,
        width=width,
        height=height,
        projection_matrix=build_projection(float(width), float(height)),
        line_color=line_color,
    )
    return rendering_window, mgl_ctx, line_surface


__all__ = ["create_window_and_surface"]
