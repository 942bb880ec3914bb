"""
どこで: `engine.core` のティック契約。
何を: `FrameClock` から毎ティック呼ばれる部品（ドライバ/オーバーレイ）の `Tickable` Protocol。
なぜ: アニメーションの更新と画面表示の更新を、同じタイマー 1 本から同じ順序で回すため。
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Tickable(Protocol):
    """`tick(dt)` を 1 ティックに 1 回受け取る部品。"""

    def tick(self, dt: float) -> None:
        """`dt` は前回ティックからの経過秒。角度の増分は `dt` に依存させない。"""
