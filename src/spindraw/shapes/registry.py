"""
どこで: `shapes` のレジストリ層。
何を: メッシュファクトリを「シーン設定キー・既定配置・描画順」と一緒に登録し、
      設定セクションの検証とメッシュ生成を担う `ShapeEntry` を返す。
なぜ: シーン構築を登録内容だけで駆動し、設定値の型検査を図形ごとに書かないため。

パラメータの宣言:
- 既定値はファクトリ関数のキーワード既定値をそのまま使う。
- 型は関数属性 `__param_meta__`（`{"name": {"type": "number" | "integer", "min": ...}}`）。
  宣言が無い引数は既定値の型から推論する（int → integer, それ以外 → number）。
- 範囲の最終検証はファクトリ自身が行う（レジストリは型と下限のみ）。

使用例:
    @shape("square", position=(300.0, 300.0))
    def make_square_mesh(half_extent: float = 100.0) -> Mesh: ...

    entry = get_shape("square")
    params, position = entry.parse({"half_extent": 40})
    mesh = entry.build(params)
"""

from __future__ import annotations

import inspect
import itertools
import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from spindraw.common.types import Vec2
from spindraw.engine.core.mesh import Mesh

MeshFactory = Callable[..., Mesh]
ParamValue = float | int

PARAM_TYPES: tuple[str, ...] = ("number", "integer")
POSITION_KEY = "position"


def parse_vec2(value: Any, label: str) -> Vec2:
    """`[x, y]` を `(float, float)` に変換する。形が合わなければ `ValueError`。"""
    if isinstance(value, (str, bytes)):
        raise ValueError(f"{label} must be a pair of numbers, got {value!r}")
    try:
        x, y = value
        return float(x), float(y)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{label} must be a pair of numbers, got {value!r}") from e


@dataclass(frozen=True)
class ShapeParam:
    """ファクトリ引数 1 つ分の宣言。"""

    name: str
    default: ParamValue
    type: str = "number"
    min: float | None = None

    def coerce(self, value: Any) -> ParamValue:
        """設定値を宣言型へ変換する。

        - bool/文字列/非数値は拒否。
        - `integer` は整数値のみ受理（30.0 は可、30.9 は不可）。端数を切り捨てない。
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{self.name} must be a {self.type}, got {value!r}")
        if self.type == "integer":
            if not math.isfinite(float(value)) or int(value) != value:
                raise ValueError(f"{self.name} must be an integer, got {value!r}")
            out: ParamValue = int(value)
        else:
            out = float(value)
        if self.min is not None and out < self.min:
            raise ValueError(f"{self.name} must be >= {self.min:g}, got {value!r}")
        return out


def _params_of(fn: MeshFactory) -> tuple[ShapeParam, ...]:
    meta: Mapping[str, Mapping[str, Any]] = getattr(fn, "__param_meta__", {}) or {}
    out: list[ShapeParam] = []
    for p in inspect.signature(fn).parameters.values():
        if p.default is inspect.Parameter.empty:
            raise TypeError(f"{fn.__name__}: parameter '{p.name}' needs a default value")
        m = meta.get(p.name, {})
        inferred = "integer" if type(p.default) is int else "number"
        ptype = m.get("type", inferred)
        if ptype not in PARAM_TYPES:
            raise ValueError(f"{fn.__name__}.{p.name}: unknown param type {ptype!r}")
        out.append(ShapeParam(p.name, p.default, ptype, m.get("min")))
    return tuple(out)


@dataclass(frozen=True)
class ShapeEntry:
    """登録済み図形 1 つ分。`name` はシーン設定（`scene.<name>`）のキーを兼ねる。"""

    name: str
    factory: MeshFactory
    position: Vec2
    order: int
    seq: int

    @property
    def params(self) -> tuple[ShapeParam, ...]:
        # `__param_meta__` は関数定義（= 登録）の後に付くため都度読む
        return _params_of(self.factory)

    def defaults(self) -> dict[str, ParamValue]:
        return {p.name: p.default for p in self.params}

    def parse(self, section: Mapping[str, Any] | None) -> tuple[dict[str, ParamValue], Vec2]:
        """設定セクション `{<param>: ..., position: [x, y]}` を検証して `(params, position)` を返す。

        欠損キーは既定値。未知のキー/型違いは `ValueError`。
        """
        if section is None:
            section = {}
        if not isinstance(section, Mapping):
            raise ValueError(f"scene.{self.name} must be a mapping, got {section!r}")
        declared = {p.name: p for p in self.params}
        unknown = sorted(str(k) for k in section if k not in declared and k != POSITION_KEY)
        if unknown:
            raise ValueError(f"unknown keys in scene.{self.name}: {', '.join(unknown)}")
        params = {
            name: p.coerce(section[name]) if name in section else p.default
            for name, p in declared.items()
        }
        position = parse_vec2(
            section.get(POSITION_KEY, self.position), f"scene.{self.name}.{POSITION_KEY}"
        )
        return params, position

    def build(self, params: Mapping[str, ParamValue] | None = None) -> Mesh:
        """ローカル空間のメッシュを生成する（範囲検証はファクトリ側）。"""
        return self.factory(**dict(params or {}))


_shapes: dict[str, ShapeEntry] = {}
_seq = itertools.count()


def _key(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"shape name must be str, got {type(name).__name__}")
    key = name.strip().lower()
    if not key:
        raise ValueError("shape name must not be empty")
    return key


def shape(name: str, *, position: Vec2 = (0.0, 0.0), order: int = 0):
    """メッシュファクトリを図形として登録するデコレータ。

    Parameters
    ----------
    name : str
        図形名（シーン設定のセクション名。小文字化して保持）。
    position : Vec2
        設定に `position` が無いときのワールド配置。
    order : int
        描画順（小さいほど先。同順位は登録順）。

    例外:
    - TypeError: 関数以外、または既定値の無い引数を持つ関数。
    - ValueError: 同名で別の関数が登録済み。
    """
    key = _key(name)
    pos = parse_vec2(position, f"{key}.position")

    def decorator(fn: MeshFactory) -> MeshFactory:
        if not inspect.isfunction(fn):
            raise TypeError(f"@shape registers functions only: got {fn!r}")
        existing = _shapes.get(key)
        if existing is not None and existing.factory is not fn:
            raise ValueError(f"shape '{key}' is already registered")
        _params_of(fn)
        seq = existing.seq if existing is not None else next(_seq)
        _shapes[key] = ShapeEntry(key, fn, pos, int(order), seq)
        return fn

    return decorator


def get_shape(name: str) -> ShapeEntry:
    """登録済みの図形を返す。未登録は `KeyError`。"""
    key = _key(name)
    try:
        return _shapes[key]
    except KeyError:
        raise KeyError(f"shape '{name}' is not registered") from None


def list_shapes() -> list[str]:
    """図形名を描画順（`order`, 登録順）で返す。"""
    return [e.name for e in sorted(_shapes.values(), key=lambda e: (e.order, e.seq))]


def is_shape_registered(name: str) -> bool:
    return _key(name) in _shapes


def unregister(name: str) -> None:
    """登録を解除する（未登録なら何もしない）。"""
    _shapes.pop(_key(name), None)


__all__ = [
    "ShapeEntry",
    "ShapeParam",
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "parse_vec2",
]
