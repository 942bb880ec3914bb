"""
どこで: `engine.render` のパス構築ヘルパ。
何を: begin/move/line/close の呼び出し列を線分リストへ変換する `PathBuilder`。
なぜ: 描画先ごとにパス状態機械を重複実装しないため（記録用と GL 用で共有）。
"""

from __future__ import annotations

Point = tuple[float, float]
Segment = tuple[Point, Point]


class PathBuilder:
    """Canvas 2D と同じ規則でサブパスを線分化する。

    - `move_to` は新しいサブパスを開始する。
    - 現在点が無い状態の `line_to` は `move_to` と同じ扱い。
    - `close_path` は現在のサブパスの始点へ戻る線分を追加する。
    """

    def __init__(self) -> None:
        self._segments: list[Segment] = []
        self._current: Point | None = None
        self._start: Point | None = None

    def begin(self) -> None:
        self._segments = []
        self._current = None
        self._start = None

    def move_to(self, x: float, y: float) -> None:
        self._current = (float(x), float(y))
        self._start = self._current

    def line_to(self, x: float, y: float) -> None:
        p = (float(x), float(y))
        if self._current is None:
            self._current = p
            self._start = p
            return
        self._segments.append((self._current, p))
        self._current = p

    def close(self) -> None:
        if self._current is None or self._start is None:
            return
        if self._current != self._start:
            self._segments.append((self._current, self._start))
        self._current = self._start

    @property
    def segments(self) -> list[Segment]:
        """構築中の線分（コピー）。"""
        return list(self._segments)


def segment_inside(seg: Segment, x: float, y: float, w: float, h: float) -> bool:
    """線分の両端点が矩形内にあるか。"""
    return all(x <= px <= x + w and y <= py <= y + h for px, py in seg)


def covers(x: float, y: float, w: float, h: float, width: float, height: float) -> bool:
    """矩形が描画先全体を覆うか。"""
    return x <= 0 and y <= 0 and x + w >= width and y + h >= height


__all__ = ["PathBuilder", "Point", "Segment", "segment_inside", "covers"]
