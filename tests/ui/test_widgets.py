from __future__ import annotations

import numpy as np
import pytest

from engine.core.errors import WidgetStateTypeError
from engine.core.rect import Rect
from engine.ui.state import TextFieldState
from engine.ui.window import Window
from tests._utils.frames import frame, press_at, text_pixels

WHITE = np.array((255, 255, 255, 255), dtype=np.uint8)
# 既定高さ 12 のウィジェットを inset 2 した描画域
INNER = Rect(2, 2, 198, 10)


def _lit(px: np.ndarray) -> np.ndarray:
    return np.all(px == WHITE, axis=2)


def test_box_draws_border_and_background(win: Window) -> None:
    px = frame(win, lambda w: w.next_width(20).box())
    lit = _lit(px)
    assert lit[0, :20].all() and lit[11, :20].all()
    assert lit[:12, 0].all() and lit[:12, 19].all()
    assert not lit[1:11, 1:19].any()
    assert not lit[:, 20:].any()
    assert not lit[12:].any()


def test_text_clears_background_and_draws_inset(win: Window) -> None:
    px = frame(win, lambda w: w.text("Hi"))
    lit = _lit(px)
    assert lit.any()
    assert np.array_equal(lit, text_pixels(win, INNER, 2, 2, "Hi"))
    # 枠は描かない
    assert not lit[0].any()


def test_text_status_has_no_identifier(win: Window) -> None:
    win.start_frame()
    st = win.text("x")
    win.end_frame()
    assert st.widget_id == ""
    assert not st.focused()


def test_center_applies_to_next_text_only(win: Window) -> None:
    def body(w: Window) -> None:
        w.center().text("A")
        w.text("A")

    lit = _lit(frame(win, body))
    cx = 2 + (196 - win.font.measure("A")) // 2
    assert cx > 2
    expected = text_pixels(win, INNER, cx, 2, "A") | text_pixels(
        win, Rect(2, 14, 198, 22), 2, 14, "A"
    )
    assert np.array_equal(lit, expected)


def test_center_is_consulted_per_line(win: Window) -> None:
    tall = Rect(2, 2, 198, 22)
    cx = 2 + (196 - win.font.measure("A")) // 2
    lh = win.font.line_height

    lit = _lit(frame(win, lambda w: w.next_height(24).center().text("A\nA")))
    expected = text_pixels(win, tall, cx, 2, "A") | text_pixels(win, tall, 2, 2 + lh, "A")
    assert np.array_equal(lit, expected)

    lit = _lit(frame(win, lambda w: w.next_height(24).center().keep_mutator("center").text("A\nA")))
    expected = text_pixels(win, tall, cx, 2, "A") | text_pixels(win, tall, cx, 2 + lh, "A")
    assert np.array_equal(lit, expected)


def test_multiline_text_is_clipped_to_inset_rect(win: Window) -> None:
    lit = _lit(frame(win, lambda w: w.text("A\nB\nC")))
    assert not lit[10:].any()


def test_box_click_works_but_never_focuses(win: Window) -> None:
    press_at(win, 5, 5)
    win.start_frame()
    st = win.box()
    assert st.clicked()
    assert not st.focused()
    assert win.focus is None
    win.end_frame()


def test_button_click_sets_focus(win: Window) -> None:
    press_at(win, 100, 6)
    win.start_frame()
    assert win.button("b1", "One").clicked()
    win.end_frame()
    assert win.focus == "b1"


def test_focus_transfer_without_click_on_other(win: Window) -> None:
    press_at(win, 100, 6)
    frame(win, lambda w: w.button("b1", "One"))
    win.start_frame()
    assert win.button("b2", "Two").focused() is False
    assert win.button("b1", "One").focused() is True
    win.end_frame()
    # フォーカスは自動では外れない
    frame(win)
    assert win.focus == "b1"


def test_clicking_another_button_moves_focus(win: Window) -> None:
    press_at(win, 100, 6)
    frame(win, lambda w: (w.button("b1", "One"), w.button("b2", "Two")))
    press_at(win, 100, 18)
    frame(win, lambda w: (w.button("b1", "One"), w.button("b2", "Two")))
    assert win.focus == "b2"


def _focus_field(win: Window, field_id: str = "f", text: str = "") -> None:
    press_at(win, 100, 6)
    frame(win, lambda w: w.text_field(field_id, text))
    assert win.focus == field_id


def test_text_field_backspace(win: Window) -> None:
    _focus_field(win, text="abc")
    win.char("\b")
    win.start_frame()
    text, st = win.text_field("f", "abc")
    win.end_frame()
    assert text == "ab"
    assert st.focused()


def test_text_field_backspace_on_empty(win: Window) -> None:
    _focus_field(win)
    win.char("\b")
    win.start_frame()
    text, _ = win.text_field("f", "")
    win.end_frame()
    assert text == ""


def test_text_field_applies_chars_in_arrival_order(win: Window) -> None:
    _focus_field(win)
    for ch in "hello\b\bp":
        win.char(ch)
    win.start_frame()
    text, _ = win.text_field("f", "")
    win.end_frame()
    assert text == "help"
    assert win.text_field_state("f").cursor == 4


def test_text_field_chars_are_consumed_once(win: Window) -> None:
    _focus_field(win)
    win.char("x")
    win.start_frame()
    text, _ = win.text_field("f", "")
    win.end_frame()
    win.start_frame()
    text, _ = win.text_field("f", text)
    win.end_frame()
    assert text == "x"


def test_unfocused_text_field_ignores_chars(win: Window) -> None:
    win.char("x")
    win.start_frame()
    text, st = win.text_field("f", "abc")
    win.end_frame()
    assert text == "abc"
    assert not st.focused()
    assert win.text_field_state("f").cursor == -1


def test_click_frame_also_applies_that_frames_chars(win: Window) -> None:
    press_at(win, 100, 6)
    win.char("z")
    win.start_frame()
    text, st = win.text_field("f", "")
    win.end_frame()
    assert st.clicked() and st.focused()
    assert text == "z"


def test_text_field_shares_id_with_host_widget_state(win: Window) -> None:
    win.widget_state("name", "")
    press_at(win, 100, 6)
    win.char("c")
    win.start_frame()
    text, st = win.text_field("name", "ab")
    win.end_frame()
    assert st.focused()
    assert text == "abc"
    assert win.text_field_state("name").cursor == 3
    # ホストの値はそのまま
    assert win.widget_state("name", None) == ""
    with pytest.raises(WidgetStateTypeError):
        win.widget_state_as("name", TextFieldState, TextFieldState)


def test_clear_state_resets_text_field_caret(win: Window) -> None:
    _focus_field(win)
    assert win.text_field_state("f").cursor == 0
    win.clear_state()
    assert win.text_field_state("f").cursor == -1
