from __future__ import annotations

import pytest

from engine.host.events import (
    PYGLET_MOTION_BACKSPACE,
    flip_y,
    motion_to_char,
    text_to_chars,
    to_engine_button,
)
from engine.io.input import BACKSPACE, MouseButton
from engine.ui.window import Window


def test_flip_y_maps_bottom_left_to_top_left() -> None:
    assert flip_y(0, 100) == 99
    assert flip_y(99, 100) == 0


@pytest.mark.parametrize(
    "button, expected",
    [(1, MouseButton.LEFT), (2, MouseButton.MIDDLE), (4, MouseButton.RIGHT), (8, 0)],
)
def test_to_engine_button(button: int, expected: int) -> None:
    assert to_engine_button(button) == expected


def test_text_to_chars_drops_control_characters() -> None:
    assert text_to_chars("ab\rc") == ["a", "b", "c"]


def test_motion_to_char_only_backspace() -> None:
    assert motion_to_char(PYGLET_MOTION_BACKSPACE) == BACKSPACE
    assert motion_to_char(0xFF51) is None


def test_translated_events_drive_a_click() -> None:
    win = Window(200, 100)
    # pyglet 座標（左下原点）でボタン中心付近を押す
    win.mouse_pos(100, flip_y(93, 100))
    win.mouse_down(to_engine_button(1))
    win.start_frame()
    assert win.button("b", "B").clicked()
    win.end_frame()
