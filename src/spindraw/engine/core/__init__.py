"""コア層: Mesh 型、変換、図形状態、ティック駆動。"""

from .frame_clock import FrameClock
from .mesh import Mesh
from .shape_state import ShapeState, advance_angle
from .tickable import Tickable
from .transform_utils import rotate, to_world_space, transform_combined

__all__ = [
    "FrameClock",
    "Mesh",
    "ShapeState",
    "advance_angle",
    "Tickable",
    "rotate",
    "to_world_space",
    "transform_combined",
]
