"""spindraw — 正方形と円を自身の中心で回し続ける 2D 線描画。"""

__version__ = "2026.10"
