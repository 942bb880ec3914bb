"""
どこで: `engine.render` の描画先インターフェース。
何を: パス構築（begin/move/line/close/stroke）と矩形クリアを持つ `Surface` Protocol。
なぜ: レンダラを GL/記録用など具体的な描画先から切り離し、最小インターフェイスで統一するため。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """描画先。座標は左上原点・Y 下向きのピクセル。"""

    width: int
    height: int

    def begin_path(self) -> None:
        """新しいパスを開始する（未確定のパスは破棄）。"""

    def move_to(self, x: float, y: float) -> None:
        """現在点を移動する（線は引かない）。"""

    def line_to(self, x: float, y: float) -> None:
        """現在点から (x, y) への線分をパスに追加する。"""

    def close_path(self) -> None:
        """サブパスの始点へ戻る線分を追加する。"""

    def stroke(self) -> None:
        """現在のパスを描画先へ確定する。"""

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        """矩形領域を消去する。"""


def clear_surface(surface: Surface) -> None:
    """描画先全体を 1 回でクリアする。"""
    surface.clear_rect(0, 0, surface.width, surface.height)


__all__ = ["Surface", "clear_surface"]
