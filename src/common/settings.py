"""
どこで: `common.settings`
何を: colorscheme の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 既定シード/色数/距離/web-safe の既定値を 1 箇所に集め、テストから差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int, env_str


@dataclass
class _Settings:
    # Palette defaults
    DEFAULT_SEED: int | None = None
    DEFAULT_COLOR_COUNT: int = 4
    DEFAULT_DISTANCE: float = 0.5
    DEFAULT_WEB_SAFE: bool = False

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 不正値は既定値へフォールバックし、例外は送出しない。
    - 色数のクランプは `ColorScheme` 側で行う（ここでは下限 1 のみ）。
    """
    _settings.DEFAULT_SEED = env_int("COLORSCHEME_SEED", None)
    _settings.DEFAULT_COLOR_COUNT = env_int("COLORSCHEME_COLOR_COUNT", 4, min_value=1) or 4

    distance = env_float("COLORSCHEME_DISTANCE", 0.5)
    if distance is None or not (0.0 <= distance <= 1.0):
        distance = 0.5
    _settings.DEFAULT_DISTANCE = distance
    _settings.DEFAULT_WEB_SAFE = env_bool("COLORSCHEME_WEB_SAFE", False)

    _settings.LOG_LEVEL = env_str("COLORSCHEME_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
