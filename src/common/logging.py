"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- ライブラリ側の各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけ。
- アプリ側で設定が無い場合に、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

from . import settings


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `COLORSCHEME_LOG_LEVEL`（settings）を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
