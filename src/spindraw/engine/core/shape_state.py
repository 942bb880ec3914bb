"""
どこで: `engine.core` の図形状態。
何を: 図形ごとの状態 `ShapeState`（ローカルメッシュ/配置/回転角）と角度累積 `advance_angle`。
なぜ: 回転角をグローバル変数ではなく明示的な値として受け渡し、ドライバが唯一の更新者になるため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from spindraw.common.types import Vec2

from .mesh import Mesh

WrapMode = Literal["single", "modulo"]
WRAP_MODES: tuple[str, ...] = ("single", "modulo")
FULL_TURN = 360.0


def advance_angle(angle: float, increment: float, *, wrap: WrapMode = "single") -> float:
    """回転角に増分を加え、[0, 360) へ折り返した値を返す。

    - `single`: `angle >= 360` のとき 1 回だけ 360 を引く。増分が [0, 360) の範囲なら
      常に [0, 360) に収まる。範囲外の増分（負値や 360 以上）は正規化しきれない。
    - `modulo`: `angle % 360`。任意の有限な増分で [0, 360) に収まる。
    """
    new_angle = angle + increment
    if wrap == "single":
        if new_angle >= FULL_TURN:
            new_angle -= FULL_TURN
        return new_angle
    if wrap == "modulo":
        return new_angle % FULL_TURN
    raise ValueError(f"unknown wrap mode: {wrap!r}; allowed={', '.join(WRAP_MODES)}")


@dataclass(frozen=True)
class ShapeState:
    """描画対象 1 つ分の状態。

    Attributes
    ----------
    name : str
        図形名（ログ/診断用）。
    mesh : Mesh
        ローカル空間のメッシュ（生成後は不変）。
    position : Vec2
        ワールド空間での配置（中心）。ループでは変更しない。
    angle : float
        現在の回転角 [deg]。ティックごとに更新される唯一の値。
    """

    name: str
    mesh: Mesh
    position: Vec2
    angle: float = 0.0

    def with_angle(self, angle: float) -> "ShapeState":
        return replace(self, angle=float(angle))


__all__ = ["ShapeState", "WrapMode", "WRAP_MODES", "advance_angle", "FULL_TURN"]
