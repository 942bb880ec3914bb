"""
どこで: `api.sketch`（実行ランナー）。
何を: シーン（正方形と円）を構築し、AnimationDriver を一定レートで駆動して描画する。
なぜ: 設定解決・ウィンドウ/GL 初期化・キー操作・終了処理を 1 関数にまとめ、利用側を 1 行にするため。

主エントリポイント:
- `run_scene(*, canvas_size=None, fps=None, ...)`:
  pyglet ウィンドウ + ModernGL の `LineSurface` に描画する対話実行。
- `run_headless(ticks, ...)`:
  `RecordingSurface` に対して `ticks` 回だけ駆動し、ドライバを返す（GL 不要）。

実行フロー（概要）:
1) 設定解決: `load_config()` と環境変数（`common.settings`）から FPS/キャンバス/色/折り返し方式。
2) シーン構築: `SceneConfig.from_mapping(cfg["scene"])` → `build_scene()`（正方形 → 円）。
3) 操作入力: `ControlPanel.from_mapping(cfg["controls"])`。ドライバには `panel.snapshot` を渡す。
4) ウィンドウ/GL: `RenderWindow` と ModernGL コンテキスト、`LineSurface` を生成。
5) フレーム駆動: `FrameClock([driver, overlay])` を `pyglet.clock.schedule_interval` で 1/fps 秒ごとに呼ぶ。
6) キー操作: SPACE=回転切替、UP/RIGHT=増分+、DOWN/LEFT=増分−、ESC=終了。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from spindraw.common import settings as _settings
from spindraw.common.logging import setup_default_logging
from spindraw.common.types import RGBA
from spindraw.engine.core.frame_clock import FrameClock
from spindraw.engine.io.controls import ControlPanel
from spindraw.engine.render.recording import RecordingSurface
from spindraw.engine.runtime.driver import AnimationDriver
from spindraw.util.config import load_config, section

from .scene import SceneConfig, build_scene
from .sketch_runner.utils import (
    resolve_canvas_size,
    resolve_colors,
    resolve_fps,
    resolve_wrap_mode,
)

logger = logging.getLogger(__name__)


def run_headless(
    ticks: int,
    *,
    canvas_size: tuple[int, int] | None = None,
    scene: SceneConfig | None = None,
    panel: ControlPanel | None = None,
    angle_wrap: str | None = None,
    config: Mapping[str, Any] | None = None,
) -> AnimationDriver:
    """GL を使わずに `ticks` ティック分だけ駆動し、ドライバを返す。

    描画先は `RecordingSurface`（`driver.surface`）。最後のフレームの線分が残る。
    """
    if int(ticks) < 0:
        raise ValueError(f"ticks must be >= 0, got {ticks}")
    cfg = dict(config) if config is not None else load_config()
    setup_default_logging()

    width, height = resolve_canvas_size(canvas_size, cfg)
    scene_cfg = scene if scene is not None else SceneConfig.from_mapping(section(cfg, "scene"))
    control_panel = panel if panel is not None else ControlPanel.from_mapping(section(cfg, "controls"))

    surface = RecordingSurface(width=width, height=height)
    driver = AnimationDriver(
        surface,
        build_scene(scene_cfg),
        control_panel.snapshot,
        wrap=resolve_wrap_mode(angle_wrap, cfg),
        debug_ticks=_settings.get().DEBUG_TICKS,
    )
    clock = FrameClock([driver])
    for _ in range(int(ticks)):
        clock.tick(1.0 / resolve_fps(None, cfg))
    logger.info(
        "headless: ticks=%d angles=%s",
        driver.tick_count,
        {s.name: round(s.angle, 6) for s in driver.states},
    )
    return driver


def run_scene(
    *,
    canvas_size: tuple[int, int] | None = None,
    fps: int | None = None,
    background: str | tuple[float, ...] | None = None,
    line_color: str | tuple[float, ...] | None = None,
    scene: SceneConfig | None = None,
    panel: ControlPanel | None = None,
    angle_wrap: str | None = None,
    show_overlay: bool = True,
    init_only: bool = False,
) -> None:
    """ウィンドウを開いてシーンを回し続ける（ESC/ウィンドウを閉じるまで）。

    Parameters
    ----------
    canvas_size : tuple[int, int] | None
        `(width, height)` [px]。None で設定（既定 600×600）。
    fps : int | None
        ティックレート。None で `SPD_FPS` → 設定 → 60。
    background, line_color : str | tuple | None
        RGBA (0–1) / 0–255 / Hex。None で設定、線色は背景から自動。
    scene : SceneConfig | None
        図形サイズ/配置。None で設定 `scene` セクション。
    panel : ControlPanel | None
        操作入力。None で設定 `controls` セクション。
    angle_wrap : str | None
        `single` | `modulo`。None で `SPD_ANGLE_WRAP` → 設定 → `single`。
    show_overlay : bool, default True
        角度ラベル/操作ヘルプの表示。
    init_only : bool, default False
        True で設定解決とシーン構築だけ行い、pyglet を読み込まずに戻る。
    """
    setup_default_logging()
    cfg = load_config()

    # ---- ① 設定解決 ------------------------------------------------
    fps = resolve_fps(fps, cfg)
    width, height = resolve_canvas_size(canvas_size, cfg)
    bg_rgba, line_rgba = resolve_colors(background, line_color, cfg)
    wrap = resolve_wrap_mode(angle_wrap, cfg)

    # ---- ② シーン/操作入力 ----------------------------------------
    scene_cfg = scene if scene is not None else SceneConfig.from_mapping(section(cfg, "scene"))
    states = build_scene(scene_cfg)
    control_panel = panel if panel is not None else ControlPanel.from_mapping(section(cfg, "controls"))

    if init_only:
        return None

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from spindraw.engine.core.tickable import Tickable
    from spindraw.engine.ui.overlay import ControlOverlay

    from .sketch_runner.render import create_window_and_surface

    # ---- ③ Window & ModernGL --------------------------------------
    rendering_window, _mgl_ctx, line_surface = create_window_and_surface(
        width, height, background=bg_rgba, line_color=line_rgba
    )

    driver = AnimationDriver(
        line_surface,
        states,
        control_panel.snapshot,
        wrap=wrap,
        debug_ticks=_settings.get().DEBUG_TICKS,
    )

    overlay: ControlOverlay | None = None
    if show_overlay:
        overlay = ControlOverlay(rendering_window, control_panel, color=_label_color(line_rgba))

    def _draw_main() -> None:
        line_surface.draw()
        if overlay is not None:
            overlay.draw()

    rendering_window.add_draw_callback(_draw_main)

    # ---- ④ FrameClock ---------------------------------------------
    tickables: list[Tickable] = [driver]
    if overlay is not None:
        tickables.append(overlay)
    frame_clock = FrameClock(tickables)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)
    logger.info("run: %dx%d @ %d fps (wrap=%s)", width, height, fps, wrap)

    # ---- ⑤ pyglet イベント -----------------------------------------
    key_actions = {
        key.SPACE: "toggle",
        key.UP: "increase",
        key.RIGHT: "increase",
        key.DOWN: "decrease",
        key.LEFT: "decrease",
    }

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.close()
            return
        action = key_actions.get(sym)
        if action is not None:
            control_panel.apply(action)

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        pyglet.clock.unschedule(frame_clock.tick)
        try:
            line_surface.release()
        except Exception as e:  # GL コンテキスト破棄後の解放失敗は無視してよい
            logger.debug("surface release failed: %s", e, exc_info=True)
        setattr(on_close, "_closed", True)
        logger.info("closed after %d ticks", driver.tick_count)
        pyglet.app.exit()

    pyglet.app.run()


def _label_color(line_rgba: RGBA) -> tuple[int, int, int, int]:
    r, g, b, _a = line_rgba
    return int(r * 255), int(g * 255), int(b * 255), 200


__all__ = ["run_scene", "run_headless"]
