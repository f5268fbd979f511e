from __future__ import annotations

from engine.core.rect import Rect
from engine.ui.layout import LayoutCursor
from engine.ui.window import WIDGET_HEIGHT, Window


def test_cursor_flows_down() -> None:
    c = LayoutCursor(100)
    assert c.place(100, 12) == Rect(0, 0, 100, 12)
    assert (c.x, c.y) == (0, 12)
    assert c.place(40, 5) == Rect(0, 12, 40, 17)


def test_cursor_same_line_and_tallest_run() -> None:
    c = LayoutCursor(100)
    c.place(30, 20)
    c.same_line()
    assert (c.x, c.y) == (30, 0)
    assert c.remaining_width == 70
    assert c.place(70, 10) == Rect(30, 0, 100, 10)
    # 次の行は行内で最も下の下端から
    assert c.place(10, 10) == Rect(0, 20, 10, 30)


def test_two_texts_stack_without_overlap(win: Window) -> None:
    win.start_frame()
    a = win.text("one").rect
    b = win.text("two").rect
    win.end_frame()
    assert b.min_y >= a.max_y
    assert a.intersect(b).empty
    assert a == Rect(0, 0, 200, WIDGET_HEIGHT)


def test_same_line_buttons_share_top(win: Window) -> None:
    win.start_frame()
    a = win.next_width(50).button("a", "X").rect
    win.same_line()
    b = win.button("b", "Y").rect
    win.end_frame()
    assert a.min_y == b.min_y == 0
    assert b.min_x == a.max_x == 50
    # 幅の既定値は行の残り
    assert b.max_x == 200


def test_same_line_after_full_width_widget(win: Window) -> None:
    win.start_frame()
    a = win.button("a", "X").rect
    b = win.same_line().button("b", "Y").rect
    win.end_frame()
    assert b.min_x == a.max_x
    assert b.min_y == a.min_y
    assert b.empty


def test_new_line_starts_below_tallest_widget(win: Window) -> None:
    win.start_frame()
    win.next_width(50).next_height(30).box()
    win.same_line()
    win.box()
    t = win.text("below").rect
    win.end_frame()
    assert t.min_y == 30


def test_next_width_height_are_one_shot(win: Window) -> None:
    win.start_frame()
    a = win.next_width(40).next_height(20).box().rect
    b = win.box().rect
    win.end_frame()
    assert (a.width, a.height) == (40, 20)
    assert (b.width, b.height) == (200, WIDGET_HEIGHT)


def test_kept_width_applies_to_two_widgets(win: Window) -> None:
    win.start_frame()
    a = win.next_width(40).keep_mutator("nextwidth").box().rect
    b = win.box().rect
    c = win.box().rect
    win.end_frame()
    assert (a.width, b.width, c.width) == (40, 40, 200)


def test_negative_size_draws_nothing(win: Window) -> None:
    win.start_frame()
    r = win.next_width(-5).box().rect
    px = win.end_frame()
    assert r.empty
    assert not px[:, :, :3].any()
