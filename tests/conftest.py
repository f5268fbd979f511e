"""共通フィクスチャ。

- 環境変数由来の設定を毎テスト初期化
- 200x100 の Window
"""

from __future__ import annotations

import pytest

from common import settings
from engine.ui.window import Window

_ENV_KEYS = ("IMUI_STRICT_FRAMES", "IMUI_DEBUG_INPUT", "IMUI_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for k in _ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
    settings.reload_from_env()


@pytest.fixture()
def win() -> Window:
    return Window(200, 100)


@pytest.fixture()
def strict_win() -> Window:
    return Window(200, 100, strict=True)
