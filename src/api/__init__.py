"""
どこで: `api` 入口（高レベル公開 API）。
何を: エンジン `Window`・判定結果 `Status`・入力定数・例外・PNG 保存・ホスト起動を再輸出。
なぜ: 利用者が単一名前空間からフレーム記述→出力→表示まで完結できるようにするため。

Usage:
    from api import Window

    win = Window(200, 100)
    win.start_frame()
    win.center().text("hello")
    if win.button("ok", "OK").clicked():
        ...
    pixels = win.end_frame()
"""

from __future__ import annotations

from typing import Callable

from engine.core.errors import FrameStateError, WidgetStateTypeError
from engine.core.rect import Rect
from engine.export.image import save_png
from engine.io.input import BACKSPACE, InputSnapshot, MouseButton
from engine.render.font import GlyphRenderer, RasterFont
from engine.ui.state import TextFieldState
from engine.ui.status import Status
from engine.ui.window import Window


def run(ui: Window, draw: Callable[[Window], None], *, scale: int = 3, fps: float = 60.0) -> None:
    """pyglet ホストで `draw(ui)` を毎フレーム実行する（pyglet は呼び出し時に読み込む）。"""
    from engine.host.pyglet_host import run as _run

    _run(ui, draw, scale=scale, fps=fps)


__all__ = [
    # メインAPI
    "Window",
    "Status",
    "run",
    "save_png",
    # 入力
    "BACKSPACE",
    "MouseButton",
    "InputSnapshot",
    # 描画（差し替え用）
    "GlyphRenderer",
    "RasterFont",
    "Rect",
    # 状態/例外
    "TextFieldState",
    "FrameStateError",
    "WidgetStateTypeError",
]

# バージョン情報
__version__ = "2026.10"
