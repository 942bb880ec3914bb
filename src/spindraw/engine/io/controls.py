"""
どこで: `engine.io` の操作入力。
何を: 回転の有効/無効と 1 ティックあたりの角度増分を保持する `ControlPanel` と、
      ティックごとに読み出す不変スナップショット `ControlInputs`。
なぜ: UI（キー操作/ラベル）とアニメーションのコアを切り離し、コアからは読み取り専用の
      2 値だけが見えるようにするため。

使用例:
    panel = ControlPanel(rotate_enabled=True, degrees_per_tick=1.0)
    panel.apply("increase")
    inputs = panel.snapshot()   # ControlInputs(rotate_enabled=True, degrees_per_tick=2.0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

ACTIONS: tuple[str, ...] = ("toggle", "increase", "decrease")


@dataclass(frozen=True)
class ControlInputs:
    """1 ティック分の操作入力（コアからは読み取り専用）。"""

    rotate_enabled: bool = False
    degrees_per_tick: float = 0.0


ControlsProvider = Callable[[], ControlInputs]


class ControlPanel:
    """チェックボックスとスライダ相当の可変ホルダ。

    - `degrees_per_tick` は `[min_degrees, max_degrees]` にクランプされる。
    - `increase()/decrease()` は `step` 刻みで動かす。
    - ドライバへは `snapshot` を provider として渡す。
    """

    def __init__(
        self,
        *,
        rotate_enabled: bool = True,
        degrees_per_tick: float = 1.0,
        min_degrees: float = 0.0,
        max_degrees: float = 20.0,
        step: float = 1.0,
    ) -> None:
        if float(min_degrees) > float(max_degrees):
            raise ValueError(
                f"min_degrees must be <= max_degrees, got {min_degrees} > {max_degrees}"
            )
        if float(step) <= 0.0:
            raise ValueError(f"step must be > 0, got {step}")
        self.min_degrees = float(min_degrees)
        self.max_degrees = float(max_degrees)
        self.step = float(step)
        self.rotate_enabled = bool(rotate_enabled)
        self.degrees_per_tick = self._clamp(float(degrees_per_tick))

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any] | None) -> "ControlPanel":
        """設定辞書（`controls` セクション）から生成する。欠損キーは既定値。"""
        cfg = cfg or {}
        return cls(
            rotate_enabled=bool(cfg.get("rotate", True)),
            degrees_per_tick=float(cfg.get("degrees_per_tick", 1.0)),
            min_degrees=float(cfg.get("min_degrees", 0.0)),
            max_degrees=float(cfg.get("max_degrees", 20.0)),
            step=float(cfg.get("step", 1.0)),
        )

    def _clamp(self, value: float) -> float:
        return max(self.min_degrees, min(self.max_degrees, value))

    # ---- 読み出し ----
    def snapshot(self) -> ControlInputs:
        return ControlInputs(
            rotate_enabled=self.rotate_enabled, degrees_per_tick=self.degrees_per_tick
        )

    def label_text(self) -> str:
        """スライダ脇のラベル文字列。"""
        return f"Rotation Angle ({self.degrees_per_tick:g}):"

    # ---- 更新 ----
    def toggle_rotation(self) -> bool:
        self.rotate_enabled = not self.rotate_enabled
        logger.info("rotation %s", "enabled" if self.rotate_enabled else "disabled")
        return self.rotate_enabled

    def set_degrees(self, value: float) -> float:
        self.degrees_per_tick = self._clamp(float(value))
        logger.info("degrees per tick: %g", self.degrees_per_tick)
        return self.degrees_per_tick

    def increase(self) -> float:
        return self.set_degrees(self.degrees_per_tick + self.step)

    def decrease(self) -> float:
        return self.set_degrees(self.degrees_per_tick - self.step)

    def apply(self, action: str) -> None:
        """アクション名（`toggle`/`increase`/`decrease`）を適用する。

        例外:
        - ValueError: 未知のアクション名。
        """
        if action == "toggle":
            self.toggle_rotation()
        elif action == "increase":
            self.increase()
        elif action == "decrease":
            self.decrease()
        else:
            raise ValueError(f"unknown control action: {action!r}; allowed={', '.join(ACTIONS)}")


__all__ = ["ControlInputs", "ControlPanel", "ControlsProvider", "ACTIONS"]
