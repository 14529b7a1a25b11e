"""
どこで: `common` パッケージ。
何を: colorscheme から使う軽量ユーティリティ（環境変数/設定/ロギング）。
なぜ: 配色エンジン本体から環境依存の処理を分離し、依存の向きを単純化するため。
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
