from __future__ import annotations

import pytest

from engine.core.errors import WidgetStateTypeError
from engine.ui.state import TextFieldState, WidgetStateStore
from engine.ui.window import Window


def test_lazy_default_is_stored() -> None:
    s = WidgetStateStore()
    first = s.get("a", [])
    first.append(1)
    assert s.get("a", []) == [1]
    assert "a" in s


def test_get_as_creates_with_factory_and_checks_type() -> None:
    s = WidgetStateStore()
    st = s.get_as("tf", TextFieldState, TextFieldState)
    assert st.cursor == -1
    assert s.get_as("tf", TextFieldState, TextFieldState) is st
    s.get("n", 3)
    with pytest.raises(WidgetStateTypeError):
        s.get_as("n", TextFieldState, TextFieldState)


def test_state_survives_frames_until_clear(win: Window) -> None:
    win.start_frame()
    win.widget_state("counter", {"n": 0})["n"] += 1
    win.end_frame()
    win.start_frame()
    assert win.widget_state("counter", {"n": 0}) == {"n": 1}
    win.end_frame()
    win.clear_state()
    assert win.widget_state("counter", {"n": 0}) == {"n": 0}


def test_widget_state_as_on_window(win: Window) -> None:
    assert win.widget_state_as("tf", TextFieldState, TextFieldState).cursor == -1
