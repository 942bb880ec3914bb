"""
どこで: `engine.core` の表示ウィンドウ。
何を: キャンバスと同じ大きさの固定サイズ pyglet Window。背景色でクリアしてから
      登録済みの描画コールバック（線の描画先 → オーバーレイ）を順に呼ぶ。
なぜ: 投影行列はキャンバス px に固定されるため、ウィンドウのリサイズを許さず
      1 px = 1 キャンバス単位を保つため。
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor

DrawCallback = Callable[[], None]


class RenderWindow(pyglet.window.Window):
    """回転シーン用のウィンドウ（左上原点のキャンバスを GL 側の投影で再現する）。"""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        caption: str = "spindraw",
    ):
        # 細い輪郭線のジャギー対策に 4x MSAA
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, resizable=False, config=config
        )
        self._bg_color = bg_color
        self._draw_callbacks: list[DrawCallback] = []

    def add_draw_callback(self, func: DrawCallback) -> None:
        """`on_draw` で呼ぶ描画関数を追加する（登録順に呼ばれる）。"""
        self._draw_callbacks.append(func)

    def on_draw(self):
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()
