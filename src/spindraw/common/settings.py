"""
どこで: `spindraw.common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

環境変数:
- `SPD_LOG_LEVEL`   : ランナーのログレベル（既定 INFO）。
- `SPD_ANGLE_WRAP`  : 回転角の折り返し方式 `single` | `modulo`（未設定なら設定ファイルに従う）。
- `SPD_DEBUG_TICKS` : 1 ティックごとの角度を DEBUG ログに出す。
- `SPD_FPS`         : ティックレートの上書き（1 以上）。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
_WRAP_MODES = ("single", "modulo")


@dataclass
class _Settings:
    LOG_LEVEL: str = "INFO"
    # None なら設定ファイル（animation.angle_wrap）を使う
    ANGLE_WRAP: str | None = None
    DEBUG_TICKS: bool = False
    FPS: int | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.LOG_LEVEL = env_str("SPD_LOG_LEVEL", "info", choices=_LOG_LEVELS).upper()
    wrap = env_str("SPD_ANGLE_WRAP", "", choices=_WRAP_MODES)
    _settings.ANGLE_WRAP = wrap or None
    _settings.DEBUG_TICKS = env_bool("SPD_DEBUG_TICKS", False)
    _settings.FPS = env_int("SPD_FPS", None, min_value=1)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
