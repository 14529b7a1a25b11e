"""共通フィクスチャ。

- 乱数シード固定（`from_hue()` 省略時や追加スロットのランダム色相）
- シード固定の ColorScheme 試料
- 環境変数由来の設定をテスト後に元へ戻す
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from colorscheme import ColorScheme
from common import settings


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def scheme() -> ColorScheme:
    return ColorScheme(seed=1234)


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    for name in (
        "COLORSCHEME_SEED",
        "COLORSCHEME_COLOR_COUNT",
        "COLORSCHEME_DISTANCE",
        "COLORSCHEME_WEB_SAFE",
        "COLORSCHEME_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
