"""
2D メッシュ型（プロジェクト中核モジュール）

本モジュールは、図形の頂点列を表す唯一の表現 `Mesh` を提供する。
生成（shapes）、変換（Mesh / transform_utils）、描画（engine.render）の間で
受け渡すのはすべてこの型とする。

データモデル（不変条件）:
- `coords: float64 ndarray (N, 2)` — 原点基準の頂点列（行は XY）。N >= 1。
- 頂点順が辺の接続を決める（i → i+1、最後 → 最初で閉じる）。
- `coords` は読み取り専用（`setflags(write=False)`）。変換は常に新しい `Mesh` を返す。

座標系:
- 画面座標（Y 下向き）。`rotate` の正の角度は画面上で時計回りに見える。

直感図（正方形、半辺 1）:

    #   idx  xy
    #   0   [-1, -1]   左上
    #   1   [ 1, -1]   右上
    #   2   [ 1,  1]   右下
    #   3   [-1,  1]   左下

使用例:
    from spindraw.engine.core.mesh import Mesh
    m = Mesh.from_points([(-1, -1), (1, -1), (1, 1), (-1, 1)])
    world = m.rotate(30.0).translate(300.0, 300.0)
"""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

NumberLike = float | int
PointsLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_coords(points: PointsLike) -> np.ndarray:
    """`Mesh` 生成時の内部正規化ヘルパ。"""
    try:
        arr = np.array(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"頂点列を数値配列に変換できません: {points!r}") from e
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"頂点列は形状 (N, 2) の配列である必要があります: got {arr.shape}")
    if arr.shape[0] == 0:
        raise ValueError("頂点列は少なくとも 1 頂点を含む必要があります。")
    arr = np.ascontiguousarray(arr)
    arr.setflags(write=False)
    return arr


class Mesh:
    """不変の 2D 頂点列。

    フィールド:
    - `coords (N,2) float64`: 読み取り専用の頂点配列。

    設計意図:
    - 複製はシリアライズではなく配列コピーで行う（フラットな数値列のため）。
    - 変換はすべて純関数で、新しいインスタンスを返す。
    """

    __slots__ = ("coords",)

    coords: np.ndarray

    def __init__(self, coords: PointsLike) -> None:
        self.coords = _normalize_coords(coords)

    # ── ファクトリ ───────────────────
    @classmethod
    def from_points(cls, points: PointsLike) -> "Mesh":
        """点列（list/tuple/ndarray）から `Mesh` を生成する。

        Parameters
        ----------
        points : PointsLike
            形状 `(N, 2)` の座標列（N >= 1）。

        Raises
        ------
        ValueError
            形状が `(N, 2)` でない、空、または数値に変換できない場合。
        """
        if isinstance(points, Mesh):
            return points
        return cls(points)

    # ── 基本操作（すべて純粋） ────────
    def as_array(self, *, copy: bool = True) -> np.ndarray:
        """頂点配列を返す。`copy=False` なら読み取り専用ビュー。"""
        if copy:
            return self.coords.copy()
        return self.coords

    def rotate(self, angle_deg: float) -> "Mesh":
        """原点回りの回転（純関数）。

        各頂点 (x, y) を (x·cosθ − y·sinθ, x·sinθ + y·cosθ) へ写す（θ は angle_deg のラジアン）。
        角度の正規化は行わない（負値や 360 超もそのまま使う）。
        """
        theta = np.deg2rad(float(angle_deg))
        c, s = np.cos(theta), np.sin(theta)
        x = self.coords[:, 0]
        y = self.coords[:, 1]
        rotated = np.empty_like(self.coords)
        rotated[:, 0] = x * c - y * s
        rotated[:, 1] = x * s + y * c
        return Mesh(rotated)

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Mesh":
        """平行移動（純関数）。"""
        vec = np.array([dx, dy], dtype=np.float64)
        return Mesh(self.coords + vec)

    def centroid(self) -> tuple[float, float]:
        """頂点の平均座標を返す。"""
        cx, cy = self.coords.mean(axis=0)
        return float(cx), float(cy)

    def radii(self) -> np.ndarray:
        """各頂点の原点からの距離 (N,) を返す。"""
        return np.hypot(self.coords[:, 0], self.coords[:, 1])

    # ---- シーケンス風アクセス ----
    def __len__(self) -> int:
        """頂点数 `N` を返す。"""
        return int(self.coords.shape[0])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for x, y in self.coords:
            yield float(x), float(y)

    def __getitem__(self, index: int) -> tuple[float, float]:
        x, y = self.coords[index]
        return float(x), float(y)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Mesh(N={len(self)})"


__all__ = ["Mesh", "PointsLike"]
