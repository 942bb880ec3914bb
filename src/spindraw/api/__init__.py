"""
どこで: `api` 入口（高レベル公開 API）。
何を: メッシュ生成・変換・描画・実行ランナーを単一名前空間から再輸出。
なぜ: 利用者が `from spindraw.api import ...` だけで図形生成→変換→描画→実行まで完結できるようにするため。

Usage:
    from spindraw.api import make_square_mesh, rotate, to_world_space, run

    square = make_square_mesh()
    world = to_world_space(rotate(square, 30.0), (300.0, 300.0))
    run()
"""

from spindraw.engine.core.mesh import Mesh
from spindraw.engine.core.transform_utils import rotate, to_world_space, transform_combined
from spindraw.engine.io.controls import ControlInputs, ControlPanel
from spindraw.engine.render.renderer import InvalidArgumentError, render_mesh
from spindraw.shapes import make_circle_mesh, make_square_mesh, shape

from .scene import SceneConfig, ShapeConfig, build_scene
from .sketch import run_headless
from .sketch import run_scene as run
from .sketch import run_scene as run_scene

__all__ = [
    "Mesh",
    "make_square_mesh",
    "make_circle_mesh",
    "shape",
    "rotate",
    "to_world_space",
    "transform_combined",
    "render_mesh",
    "InvalidArgumentError",
    "ControlInputs",
    "ControlPanel",
    "SceneConfig",
    "ShapeConfig",
    "build_scene",
    "run",
    "run_scene",
    "run_headless",
]
