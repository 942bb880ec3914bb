"""
どこで: `engine.runtime` のアニメーションドライバ。
何を: 1 ティックごとに操作入力を読み、各図形の回転角を進め、回転 → ワールド配置 → 描画を行う。
なぜ: 状態更新と描画の順序（全体クリア 1 回 → 宣言順に描画）を一箇所で保証するため。

1 ティックの流れ:
1) `controls()` で `ControlInputs` を取得（レベルトリガ。前回値は覚えない）。
2) 図形ごとに（宣言順）回転有効なら `advance_angle` で角度を進め（既定は 1 回だけ 360 を引く折り返し）、
   `rotate(local_mesh, angle)` → `to_world_space(..., position)` でワールドメッシュを求める。
3) 描画先全体を 1 回だけクリアし、宣言順に `render_mesh`。

ティックは同期的に完了し、重ならない（FrameClock/pyglet のタイマー 1 本から呼ばれる）。
"""

from __future__ import annotations

import logging
from typing import Sequence

from spindraw.engine.core.mesh import Mesh
from spindraw.engine.core.shape_state import ShapeState, WrapMode, advance_angle
from spindraw.engine.core.tickable import Tickable
from spindraw.engine.core.transform_utils import transform_combined
from spindraw.engine.io.controls import ControlInputs, ControlsProvider
from spindraw.engine.render.renderer import render_mesh
from spindraw.engine.render.surface import Surface, clear_surface

logger = logging.getLogger(__name__)


def advance_state(
    state: ShapeState, controls: ControlInputs, *, wrap: WrapMode = "single"
) -> ShapeState:
    """操作入力に従って 1 ティック分進めた状態を返す（純関数）。

    回転が無効なら同じ状態をそのまま返す（Idle）。
    """
    if not controls.rotate_enabled:
        return state
    return state.with_angle(advance_angle(state.angle, controls.degrees_per_tick, wrap=wrap))


def world_mesh(state: ShapeState) -> Mesh:
    """状態から描画用のワールド座標メッシュを計算する。"""
    return transform_combined(state.mesh, state.angle, state.position)


class AnimationDriver(Tickable):
    """図形状態の唯一の所有者。`tick` ごとに状態を差し替えて描画する。"""

    def __init__(
        self,
        surface: Surface,
        states: Sequence[ShapeState],
        controls: ControlsProvider,
        *,
        wrap: WrapMode = "single",
        debug_ticks: bool = False,
    ) -> None:
        self.surface = surface
        self._states: tuple[ShapeState, ...] = tuple(states)
        self._controls = controls
        self.wrap: WrapMode = wrap
        self.debug_ticks = bool(debug_ticks)
        self.tick_count = 0

    @property
    def states(self) -> tuple[ShapeState, ...]:
        return self._states

    def world_meshes(self) -> list[Mesh]:
        """現在の状態で描画されるメッシュ（宣言順）。"""
        return [world_mesh(s) for s in self._states]

    def step(self) -> tuple[ShapeState, ...]:
        """1 フレーム分の更新と描画を行い、新しい状態列を返す。

        全図形の状態とワールドメッシュを先に計算してから描画先に触れる。
        計算中に例外が出た場合、描画先と状態は前フレームのまま残る。
        """
        controls = self._controls()
        advanced = tuple(advance_state(s, controls, wrap=self.wrap) for s in self._states)
        frame = [world_mesh(s) for s in advanced]
        clear_surface(self.surface)
        for mesh in frame:
            render_mesh(self.surface, mesh)
        self._states = advanced
        self.tick_count += 1
        if self.debug_ticks and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "tick %d: %s",
                self.tick_count,
                ", ".join(f"{s.name}={s.angle:.3f}" for s in self._states),
            )
        return self._states

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        # 増分は 1 ティック単位（dt には依存しない）
        self.step()


__all__ = ["AnimationDriver", "advance_state", "world_mesh"]
