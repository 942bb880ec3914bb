"""
どこで: `spindraw.util.config`。
何を: YAML 設定（`configs/default.yaml` + ルート `config.yaml`）の読み込み（フェイルソフト）。
なぜ: キャンバス/シーン/操作の既定値をコードから分離し、実行時に差し替えられるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config load failed: %s (%s)", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/spindraw/util/` から上位へ辿り、`.git`・`pyproject.toml`・`configs/` のいずれかを
      持つもっとも近いディレクトリを返す。
    - 見つからない場合は `start.parents[2]` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/spindraw/util -> <repo>
    return cur.parents[2] if len(cur.parents) > 2 else cur.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def section(cfg: Dict[str, Any] | None, name: str) -> Dict[str, Any]:
    """トップレベルのセクションを辞書として返す（欠損/型違いは空辞書）。"""
    if not isinstance(cfg, dict):
        return {}
    value = cfg.get(name)
    return value if isinstance(value, dict) else {}


__all__ = ["load_config", "section"]
