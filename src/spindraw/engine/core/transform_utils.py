"""
どこで: `engine.core` の変換ユーティリティ。
何を: `Mesh` メソッドの薄いラッパ群（回転/ワールド配置）と、複合変換 `transform_combined()`。
なぜ: 呼び出し側の利便性を保ちつつ、変換の実体を `Mesh` へ集約するため。
"""

from __future__ import annotations

from spindraw.common.types import Vec2

from .mesh import Mesh


def rotate(mesh: Mesh, angle_deg: float) -> Mesh:
    """原点回りの回転（薄いラッパ）: `Mesh.rotate` に委譲。"""
    return mesh.rotate(angle_deg)


def to_world_space(mesh: Mesh, position: Vec2) -> Mesh:
    """ローカル座標へ `position` を加算してワールド座標へ移す（薄いラッパ）。"""
    px, py = position
    return mesh.translate(float(px), float(py))


def transform_combined(mesh: Mesh, angle_deg: float, position: Vec2) -> Mesh:
    """回転 → 平行移動 の順で適用する。

    ローカル空間で回してから配置するため、図形は自身の中心で回転する。
    順序を逆にするとワールド原点回りの公転になる。
    """
    return to_world_space(rotate(mesh, angle_deg), position)


__all__ = ["rotate", "to_world_space", "transform_combined"]
