"""描画層: Surface プロトコル、render_mesh、記録用/GL 用の描画先。"""

from .recording import RecordingSurface
from .renderer import InvalidArgumentError, render_mesh
from .surface import Surface, clear_surface

__all__ = ["RecordingSurface", "InvalidArgumentError", "render_mesh", "Surface", "clear_surface"]
