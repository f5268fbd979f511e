"""
どこで: `engine.host` のイベント変換。
何を: pyglet の座標/ボタン/テキストイベントをエンジンの入力取り込み呼び出しの引数へ変換する。
なぜ: 変換規則を GUI ループから切り離し、ディスプレイなしで検証できるようにするため。
"""

from __future__ import annotations

from engine.io.input import BACKSPACE, MouseButton

# pyglet.window.mouse / pyglet.window.key の値
PYGLET_MOUSE_LEFT = 1
PYGLET_MOUSE_MIDDLE = 2
PYGLET_MOUSE_RIGHT = 4
PYGLET_MOTION_BACKSPACE = 0xFF08

_BUTTONS = {
    PYGLET_MOUSE_LEFT: MouseButton.LEFT,
    PYGLET_MOUSE_MIDDLE: MouseButton.MIDDLE,
    PYGLET_MOUSE_RIGHT: MouseButton.RIGHT,
}


def flip_y(y: int, height: int) -> int:
    """左下原点の y を左上原点へ変換する。"""
    return int(height) - 1 - int(y)


def to_engine_button(button: int) -> int:
    """pyglet のボタンビットをエンジンのボタン番号へ。未知のボタンは 0。"""
    return int(_BUTTONS.get(button, 0))


def text_to_chars(text: str) -> list[str]:
    """`on_text` の文字列を 1 文字ずつに分解する（改行など制御文字は除く）。"""
    return [ch for ch in text if ch.isprintable()]


def motion_to_char(motion: int) -> str | None:
    """`on_text_motion` のうち文字入力として扱うもの（Backspace）を返す。"""
    if motion == PYGLET_MOTION_BACKSPACE:
        return BACKSPACE
    return None


__all__ = ["flip_y", "to_engine_button", "text_to_chars", "motion_to_char"]
