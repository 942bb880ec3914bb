"""
どこで: `spindraw.common.logging`。
何を: ランナー起動時のログ設定。ルートへの最小 `basicConfig` と、ティックログ用ロガーの開放。
なぜ: ライブラリとして import された場合はアプリ側の設定を尊重し、`run_scene`/`run_headless`
      から単体起動したときだけ既定の出力先を用意するため。

レベルの決まり方:
- 引数 `level` > `SPD_LOG_LEVEL`（既定 INFO）。
- `SPD_DEBUG_TICKS` が真なら、ルートのレベルに関係なくドライバのロガーだけ DEBUG にする。
"""

from __future__ import annotations

import logging

from . import settings as _settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
TICK_LOGGER = "spindraw.engine.runtime.driver"


def resolve_level(level: int | str | None = None) -> int:
    """ログレベルを数値で返す。`None` は設定値、未知の名前は INFO。"""
    if level is None:
        level = _settings.get().LOG_LEVEL
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        return value if isinstance(value, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str | None = None) -> bool:
    """ランナー用の既定ログ設定を適用し、`basicConfig` を行ったかを返す。

    ルートロガーにハンドラが既にあれば `basicConfig` はしない（no-op）。
    """
    if _settings.get().DEBUG_TICKS:
        logging.getLogger(TICK_LOGGER).setLevel(logging.DEBUG)
    if logging.getLogger().handlers:
        return False
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
    return True


__all__ = ["setup_default_logging", "resolve_level", "LOG_FORMAT", "TICK_LOGGER"]
