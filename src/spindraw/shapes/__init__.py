"""
どこで: `shapes` パッケージ（メッシュファクトリ登録）。
何を: ビルトイン図形（square/circle）を import 副作用で登録し、名前から解決できるようにする。
なぜ: シーン構築が登録済みの図形（設定キー/既定配置/描画順）だけで駆動されるようにするため。
"""

from .circle import make_circle_mesh
from .registry import (  # re-export
    ShapeEntry,
    ShapeParam,
    get_shape,
    is_shape_registered,
    list_shapes,
    shape,
    unregister,
)
from .square import make_square_mesh

__all__ = [
    "ShapeEntry",
    "ShapeParam",
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "make_square_mesh",
    "make_circle_mesh",
]
