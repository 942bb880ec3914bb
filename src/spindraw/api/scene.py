"""
どこで: `api.scene`（シーン構築）。
何を: 起動時設定 `SceneConfig`（登録済み図形ごとのパラメータと配置）と、そこから `ShapeState` 列を作る `build_scene`。
なぜ: メッシュと配置は起動時に 1 度だけ作り、以降は不変とするため（回転角のみドライバが更新）。

図形の種類・既定値・描画順は `shapes` のレジストリが持つ。既定では:
- 正方形: 半辺 100、配置 (300, 300)
- 円: 半径 50、30 サンプル、配置 (100, 300)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from spindraw.common.types import Vec2
from spindraw.engine.core.shape_state import ShapeState
from spindraw.shapes import get_shape, is_shape_registered, list_shapes
from spindraw.shapes.registry import ParamValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeConfig:
    """図形 1 つ分の起動時設定（検証済み）。"""

    name: str
    params: dict[str, ParamValue] = field(default_factory=dict)
    position: Vec2 = (0.0, 0.0)


@dataclass(frozen=True)
class SceneConfig:
    """起動時に 1 度だけ与えるシーン定数。`shapes` の並びが描画順。"""

    shapes: tuple[ShapeConfig, ...]

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any] | None) -> "SceneConfig":
        """設定辞書（`scene` セクション）から生成する。

        形式:
            square: {half_extent: 100, position: [300, 300]}
            circle: {radius: 50, samples: 30, position: [100, 300]}

        - 登録済みの図形はすべて含まれる（セクションが無ければ既定値）。
        - 未登録の図形名、未知のキー、型が不正な値は `ValueError`。
        """
        if cfg is None:
            cfg = {}
        if not isinstance(cfg, Mapping):
            raise ValueError(f"scene config must be a mapping, got {cfg!r}")
        unknown = sorted(
            str(k) for k in cfg if not (isinstance(k, str) and k.strip() and is_shape_registered(k))
        )
        if unknown:
            raise ValueError(
                f"unknown shapes in scene config: {', '.join(unknown)}; "
                f"registered={', '.join(list_shapes())}"
            )
        sections = {k.strip().lower(): v for k, v in cfg.items()}
        shapes: list[ShapeConfig] = []
        for name in list_shapes():
            params, position = get_shape(name).parse(sections.get(name))
            shapes.append(ShapeConfig(name=name, params=params, position=position))
        return cls(shapes=tuple(shapes))

    @classmethod
    def default(cls) -> "SceneConfig":
        return cls.from_mapping(None)

    def get(self, name: str) -> ShapeConfig:
        for s in self.shapes:
            if s.name == name:
                return s
        raise KeyError(f"shape '{name}' is not in the scene")


def build_scene(config: SceneConfig | None = None) -> tuple[ShapeState, ...]:
    """設定から描画順（既定: 正方形 → 円）の `ShapeState` 列を生成する。

    例外:
    - ValueError: ファクトリが範囲外の値を拒否した場合（例: samples < 3）。
    """
    if config is None:
        config = SceneConfig.default()
    states = tuple(
        ShapeState(name=s.name, mesh=get_shape(s.name).build(s.params), position=s.position)
        for s in config.shapes
    )
    for s in states:
        logger.info("scene: %s vertices=%d position=%s", s.name, len(s.mesh), s.position)
    return states


__all__ = ["SceneConfig", "ShapeConfig", "build_scene"]
