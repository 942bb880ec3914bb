"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/キャンバス/折り返し方式/色の解決と投影行列を提供。
なぜ: `api.sketch` を薄く保ち、GL なしでテストできる部分を分離するため。
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from spindraw.common import settings as _settings
from spindraw.common.types import RGBA
from spindraw.engine.core.shape_state import WRAP_MODES, WrapMode
from spindraw.util.color import auto_line_color, normalize_color
from spindraw.util.config import section

DEFAULT_FPS = 60
DEFAULT_CANVAS = (600, 600)


def resolve_fps(
    requested_fps: int | None, cfg: Mapping[str, Any] | None = None, *, default: int = DEFAULT_FPS
) -> int:
    """FPS を解決して 1 以上の int を返す。

    優先順: 明示指定 > `SPD_FPS` > 設定 `canvas_controller.fps` > 既定。
    数値化できない/<=0 は既定へ。
    """
    if requested_fps is not None:
        try:
            return max(1, int(requested_fps))
        except (TypeError, ValueError):
            return max(1, int(default))
    env_fps = _settings.get().FPS
    if env_fps is not None:
        return max(1, int(env_fps))
    ccfg = section(dict(cfg or {}), "canvas_controller")
    try:
        return max(1, int(ccfg.get("fps", default)))
    except (TypeError, ValueError):
        return max(1, int(default))


def resolve_canvas_size(
    canvas_size: tuple[int, int] | None, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """キャンバス [px] を解決する。

    - タプル: `(width, height)` をそのまま（正であることを検証）
    - None: 設定 `canvas.width/height`、無ければ既定 600×600
    - それ以外は `ValueError`
    """
    if canvas_size is None:
        ccfg = section(dict(cfg or {}), "canvas")
        canvas_size = (
            ccfg.get("width", DEFAULT_CANVAS[0]),
            ccfg.get("height", DEFAULT_CANVAS[1]),
        )
    try:
        w, h = int(canvas_size[0]), int(canvas_size[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"invalid canvas_size: {canvas_size!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"canvas_size must be positive, got: {(w, h)}")
    return w, h


def resolve_wrap_mode(
    requested: str | None, cfg: Mapping[str, Any] | None = None
) -> WrapMode:
    """回転角の折り返し方式を解決する。

    優先順: 明示指定 > `SPD_ANGLE_WRAP` > 設定 `animation.angle_wrap` > `single`。
    """
    mode = requested or _settings.get().ANGLE_WRAP
    if mode is None:
        mode = section(dict(cfg or {}), "animation").get("angle_wrap", "single")
    mode = str(mode).strip().lower()
    if mode not in WRAP_MODES:
        raise ValueError(f"invalid angle wrap mode: {mode!r}; allowed={', '.join(WRAP_MODES)}")
    return mode  # type: ignore[return-value]


def resolve_colors(
    background: Any, line_color: Any, cfg: Mapping[str, Any] | None = None
) -> tuple[RGBA, RGBA]:
    """背景色と線色を解決する（指定 → 設定 → 既定/自動）。"""
    ccfg = section(dict(cfg or {}), "canvas")
    bg_src = background if background is not None else ccfg.get("background_color")
    bg = normalize_color(bg_src) if bg_src is not None else (1.0, 1.0, 1.0, 1.0)
    line_src = line_color if line_color is not None else ccfg.get("line_color")
    line = normalize_color(line_src) if line_src is not None else auto_line_color(bg)
    return bg, line


def build_projection(canvas_width: float, canvas_height: float) -> np.ndarray:
    """キャンバス px（左上原点・Y 下向き）を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    proj = np.array(
        [
            [2 / canvas_width, 0, 0, -1],
            [0, -2 / canvas_height, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


__all__ = [
    "resolve_fps",
    "resolve_canvas_size",
    "resolve_wrap_mode",
    "resolve_colors",
    "build_projection",
]
