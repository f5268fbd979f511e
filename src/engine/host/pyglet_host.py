"""
どこで: `engine.host` の pyglet デスクトップホスト。
何を: pyglet Window のイベントを `Window` の入力取り込みへ転送し、毎描画でフレームを回して
      完成バッファを画面へ転写する。
なぜ: エンジン（ピクセルバッファ出力のみ）を実際のデスクトップウィンドウで操作できるようにするため。

使用例:
    win = Window.from_config()

    def draw(ui: Window) -> None:
        ui.text("hello")
        if ui.button("ok", "OK").clicked():
            print("clicked")

    host = PygletHost(win, scale=3)
    host.add_draw_callback(draw)
    pyglet.app.run(1 / 60)
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np
import pyglet
from pyglet.gl import GL_NEAREST

from common.logging import setup_default_logging
from engine.ui.window import Window

from .events import flip_y, motion_to_char, text_to_chars, to_engine_button

logger = logging.getLogger(__name__)

DrawFn = Callable[[Window], None]


class PygletHost(pyglet.window.Window):
    def __init__(self, ui: Window, *, scale: int = 1, caption: str = "imui"):
        """ホストウィンドウを生成する。

        引数:
            ui: 駆動するエンジン。ホストはこのインスタンスだけを操作する。
            scale: 1 ピクセルを何倍で表示するか（整数、最近傍拡大）。
            caption: ウィンドウタイトル。
        """
        self.ui = ui
        self.scale = max(1, int(scale))
        super().__init__(
            width=ui.width * self.scale, height=ui.height * self.scale, caption=caption
        )
        self._draw_callbacks: list[DrawFn] = []
        pyglet.image.Texture.default_mag_filter = GL_NEAREST
        pyglet.image.Texture.default_min_filter = GL_NEAREST

    def add_draw_callback(self, func: DrawFn) -> None:
        """
        フレーム中に呼び出す UI 記述関数を登録する。

        - 関数はエンジンを 1 引数で受け取り、ウィジェット関数を呼び出すこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    # ---- coordinate helpers ----
    def _to_engine(self, x: int, y: int) -> tuple[int, int]:
        ex = int(x) // self.scale
        ey = flip_y(int(y) // self.scale, self.ui.height)
        return ex, ey

    # ---- pyglet event handlers ----
    def on_mouse_motion(self, x, y, dx, dy):
        self.ui.mouse_pos(*self._to_engine(x, y))

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.ui.mouse_pos(*self._to_engine(x, y))

    def on_mouse_press(self, x, y, button, modifiers):
        self.ui.mouse_pos(*self._to_engine(x, y))
        self.ui.mouse_down(to_engine_button(button))

    def on_mouse_release(self, x, y, button, modifiers):
        self.ui.mouse_pos(*self._to_engine(x, y))
        self.ui.mouse_up(to_engine_button(button))

    def on_key_press(self, symbol, modifiers):
        self.ui.key_down(symbol)
        # ESC でウィンドウを閉じる pyglet 既定動作は維持
        return super().on_key_press(symbol, modifiers)

    def on_key_release(self, symbol, modifiers):
        self.ui.key_up(symbol)

    def on_text(self, text):
        for ch in text_to_chars(text):
            self.ui.char(ch)

    def on_text_motion(self, motion):
        ch = motion_to_char(motion)
        if ch is not None:
            self.ui.char(ch)

    def on_draw(self):
        self.ui.start_frame()
        try:
            for cb in self._draw_callbacks:
                cb(self.ui)
        finally:
            pixels = self.ui.end_frame()
        self.clear()
        self._blit(pixels)

    def _blit(self, pixels: np.ndarray) -> None:
        h, w = int(pixels.shape[0]), int(pixels.shape[1])
        img = pyglet.image.ImageData(w, h, "RGBA", pixels.tobytes(), pitch=-w * 4)
        img.blit(0, 0, width=w * self.scale, height=h * self.scale)


def run(ui: Window, draw: DrawFn, *, scale: int = 3, fps: float = 60.0) -> None:
    """`draw` を毎フレーム呼び出すホストを開いてイベントループを回す（ブロッキング）。"""
    setup_default_logging()
    host = PygletHost(ui, scale=scale)
    host.add_draw_callback(draw)
    logger.info("host started: %dx%d x%d", ui.width, ui.height, host.scale)
    pyglet.app.run(1.0 / fps)


__all__ = ["PygletHost", "run"]
