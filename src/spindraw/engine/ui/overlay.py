"""
どこで: `engine.ui` のオーバーレイ表示モジュール。
何を: ControlPanel の状態（角度ラベル/回転の有無/操作ヘルプ）を pyglet の Label で描画する。
なぜ: キー操作で変えた回転の有無と増分を、描画中の画面上で確認できるようにするため。
"""

from __future__ import annotations

import pyglet
from pyglet.window import Window

from ..core.tickable import Tickable
from ..io.controls import ControlPanel

HELP_TEXT = "SPACE: rotate on/off   UP/DOWN: angle +/-   ESC: quit"


class ControlOverlay(Tickable):
    """ControlPanel の値を毎ティック Label に反映する。"""

    def __init__(
        self,
        window: Window,
        panel: ControlPanel,
        font_size: int = 10,
        color=(0, 0, 0, 200),
    ):
        self.window = window
        self.panel = panel
        self.font_size = font_size
        self._color = color
        self._labels: dict[str, pyglet.text.Label] = {}
        y = window.height - 10
        for key in ("angle", "rotate", "help"):
            self._labels[key] = pyglet.text.Label(
                text="",
                x=10,
                y=y,
                anchor_x="left",
                anchor_y="top",
                font_size=self.font_size,
                color=self._color,
            )
            y -= self.font_size + 8

    def texts(self) -> dict[str, str]:
        """表示する文字列（テスト/診断用）。"""
        return {
            "angle": self.panel.label_text(),
            "rotate": f"Rotate: {'ON' if self.panel.rotate_enabled else 'OFF'}",
            "help": HELP_TEXT,
        }

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        for key, txt in self.texts().items():
            label = self._labels[key]
            if label.text != txt:
                label.text = txt

    # -------- draw --------
    def draw(self) -> None:
        for lab in self._labels.values():
            lab.draw()
