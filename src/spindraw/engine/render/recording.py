"""
どこで: `engine.render` のメモリ内描画先。
何を: `Surface` 呼び出しを記録し、確定した線分を保持する `RecordingSurface`。
なぜ: ヘッドレス実行とテストで、GL なしに描画結果（線分列/呼び出し順）を検査するため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .path import PathBuilder, Segment, covers, segment_inside


@dataclass
class RecordingSurface:
    """描画命令を記録するだけの描画先。

    - `calls`: `(メソッド名, 引数タプル)` の列（clear を含む全履歴）。
    - `segments`: 現在のフレームに確定している線分。全面 `clear_rect` で消える。
    - `strokes`: 直近の全面クリア以降の stroke 回数。
    """

    width: int = 600
    height: int = 600
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    strokes: int = 0
    _path: PathBuilder = field(default_factory=PathBuilder, repr=False)

    def begin_path(self) -> None:
        self.calls.append(("begin_path", ()))
        self._path.begin()

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", (x, y)))
        self._path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", (x, y)))
        self._path.line_to(x, y)

    def close_path(self) -> None:
        self.calls.append(("close_path", ()))
        self._path.close()

    def stroke(self) -> None:
        self.calls.append(("stroke", ()))
        self.segments.extend(self._path.segments)
        self.strokes += 1

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("clear_rect", (x, y, w, h)))
        if covers(x, y, w, h, self.width, self.height):
            self.segments.clear()
            self.strokes = 0
            return
        self.segments = [s for s in self.segments if not segment_inside(s, x, y, w, h)]

    # ---- helpers ----
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


__all__ = ["RecordingSurface"]
