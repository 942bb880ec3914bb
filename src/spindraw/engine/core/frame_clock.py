"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とティック数の保持）。
なぜ: pyglet のタイマーやヘッドレスループから呼ぶだけで、更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で同期実行するだけの極小クラス。

    ティックは重ならない（呼び出し側のタイマーが 1 本である前提）。
    """

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        for t in self._tickables:
            if not isinstance(t, Tickable):
                raise TypeError(f"FrameClock expects Tickable objects, got {t!r}")
        self._last_time = time.perf_counter()
        self.ticks = 0

    # pyglet.clock.schedule_interval から呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt を渡してくれる
            now = time.perf_counter()  # ヘッドレス実行用
            dt = now - self._last_time
            self._last_time = now

        for t in self._tickables:
            t.tick(dt)
        self.ticks += 1
