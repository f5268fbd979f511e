"""
どこで: `engine.ui` の即時モード GUI エンジン本体。
何を: 1 描画面ぶんの全状態（ピクセルバッファ/色/レイアウト/フォーカス/入力/ミューテータ/
      ウィジェット状態）を所有し、フレーム境界とウィジェット描画を提供する `Window`。
なぜ: ホストが毎フレーム UI 全体を関数呼び出しで記述し、結果をその場で受け取れるようにするため。

使用例:
    win = Window(200, 100)
    win.mouse_pos(30, 6)          # ホストのイベントはいつ送ってもよい
    win.start_frame()
    if win.button("ok", "OK").clicked():
        ...
    name, st = win.text_field("name", name)
    pixels = win.end_frame()      # (H, W, 4) uint8 の読み取り専用ビュー

フレーム外の呼び出し:
- strict モードでは `FrameStateError` を送出する。
- 既定（lenient）では WARNING を記録して処理を続ける。`start_frame` の二重呼び出しは
  初期化をやり直し、`end_frame` の単独呼び出しはそのままバッファを返す。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

import numpy as np

from common.settings import get as _get_settings
from common.types import RGBA8
from engine.core.errors import FrameStateError
from engine.core.rect import Rect
from engine.io.input import BACKSPACE, InputSnapshot, PendingInput
from engine.render.font import GlyphRenderer, RasterFont
from engine.render.pixel_buffer import PixelBuffer
from util.color import to_u8_rgba
from util.utils import window_section

from .layout import LayoutCursor
from .mutators import CENTER, NEXT_HEIGHT, NEXT_WIDTH, MutatorStore, MutatorValue
from .state import TextFieldState, WidgetStateStore
from .status import Status

logger = logging.getLogger(__name__)

T = TypeVar("T")

WIDGET_HEIGHT = 12
TEXT_INSET = 2

DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 100
DEFAULT_FG = "white"
DEFAULT_BG = "black"


class Window:
    """即時モード GUI エンジン（描画面 1 枚につき 1 インスタンス）。"""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        font: GlyphRenderer | None = None,
        fg: object = DEFAULT_FG,
        bg: object = DEFAULT_BG,
        strict: bool | None = None,
    ):
        """ウィンドウ（描画面）を生成する。

        引数:
            width: 幅（ピクセル）。
            height: 高さ（ピクセル）。
            font: グリフ描画。None なら Pillow 既定フォントの `RasterFont`。
            fg: 各フレーム開始時の前景色（色名/Hex/タプル）。
            bg: 各フレーム開始時の背景色。
            strict: フレーム外呼び出しで例外を送出するか。None なら `IMUI_STRICT_FRAMES`。
        """
        self.width = int(width)
        self.height = int(height)
        self._buffer = PixelBuffer(self.width, self.height)
        self._font: GlyphRenderer = font if font is not None else RasterFont()
        self._default_fg = to_u8_rgba(fg)
        self._default_bg = to_u8_rgba(bg)
        self._fg = self._default_fg
        self._bg = self._default_bg
        self._strict = strict

        self._cursor = LayoutCursor(self.width)
        self._focus_id: str | None = None

        self._pending = PendingInput()
        self._active = InputSnapshot()
        self._mouse_trigger = False

        self._mutators = MutatorStore()
        self._state = WidgetStateStore()
        self._text_fields: dict[str, TextFieldState] = {}

        self._in_frame = False
        self._frame_index = 0

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None = None, **overrides: Any) -> "Window":
        """設定（既定は `configs/default.yaml` + `config.yaml`）の `window:` 節から生成する。"""
        section = window_section(config)
        width = int(overrides.pop("width", section.get("width", DEFAULT_WIDTH)))
        height = int(overrides.pop("height", section.get("height", DEFAULT_HEIGHT)))
        overrides.setdefault("fg", section.get("fg", DEFAULT_FG))
        overrides.setdefault("bg", section.get("bg", DEFAULT_BG))
        return cls(width, height, **overrides)

    # ---- properties ----
    @property
    def strict(self) -> bool:
        if self._strict is not None:
            return self._strict
        return _get_settings().STRICT_FRAMES

    @property
    def fg(self) -> RGBA8:
        return self._fg

    @fg.setter
    def fg(self, value: object) -> None:
        self._fg = to_u8_rgba(value)

    @property
    def bg(self) -> RGBA8:
        return self._bg

    @bg.setter
    def bg(self, value: object) -> None:
        self._bg = to_u8_rgba(value)

    @property
    def font(self) -> GlyphRenderer:
        return self._font

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def in_frame(self) -> bool:
        return self._in_frame

    @property
    def input(self) -> InputSnapshot:
        """今フレームの入力スナップショット（`start_frame` で確定）。"""
        return self._active

    @property
    def mouse_clicked(self) -> bool:
        """今フレームで主ボタンが押下に転じたか。"""
        return self._mouse_trigger

    @property
    def focus(self) -> str | None:
        return self._focus_id

    def set_focus(self, widget_id: str | None) -> None:
        if widget_id != self._focus_id:
            logger.debug("focus %r -> %r", self._focus_id, widget_id)
        self._focus_id = widget_id

    def clear_focus(self) -> None:
        self.set_focus(None)

    # ---- input ingestion (pending only) ----
    def mouse_pos(self, x: int, y: int) -> None:
        self._pending.mouse_pos(x, y)

    def mouse_down(self, button: int) -> None:
        self._pending.mouse_down(button)

    def mouse_up(self, button: int) -> None:
        self._pending.mouse_up(button)

    def key_down(self, key: int) -> None:
        self._pending.key_down(key)

    def key_up(self, key: int) -> None:
        self._pending.key_up(key)

    def char(self, ch: str) -> None:
        self._pending.char(ch)

    def key_held(self, key: int) -> bool:
        return int(key) in self._active.keys

    def key_pressed(self, key: int) -> bool:
        """今フレームで押下されたキーか（押しっぱなしでは次フレームから False）。"""
        return int(key) in self._active.key_triggers

    # ---- frame lifecycle ----
    def _misuse(self, msg: str) -> None:
        if self.strict:
            raise FrameStateError(msg)
        logger.warning(msg)

    def _require_frame(self, op: str) -> None:
        if not self._in_frame:
            self._misuse(f"{op}() called outside start_frame()/end_frame()")

    def start_frame(self) -> None:
        if self._in_frame:
            self._misuse("start_frame() called while a frame is open; reinitializing")
        self._cursor.reset(self.width)
        self._fg = self._default_fg
        self._bg = self._default_bg
        self._buffer.clear(self._bg)
        self._mouse_trigger = (not self._active.mouse_left) and self._pending.mouse_left
        self._active = self._pending.snapshot()
        self._pending.clear_transients()
        self._mutators.clear()
        self._in_frame = True
        self._frame_index += 1
        logger.debug("frame %d start (click=%s)", self._frame_index, self._mouse_trigger)

    def end_frame(self) -> np.ndarray:
        """完成したバッファをコピーせずに返す（次の `start_frame` で上書きされる）。"""
        if not self._in_frame:
            self._misuse("end_frame() called without start_frame()")
        self._in_frame = False
        logger.debug("frame %d end", self._frame_index)
        return self._buffer.view()

    # ---- mutators ----
    # 生のストア操作はフレーム外でも受け付ける（次の start_frame で消える）
    def set_mutator(self, name: str, value: MutatorValue) -> "Window":
        self._mutators.set(name, value)
        return self

    def keep_mutator(self, name: str) -> "Window":
        self._mutators.keep(name)
        return self

    def get_mutator(self, name: str, default: Any) -> Any:
        return self._mutators.get(name, default)

    def next_width(self, width: int) -> "Window":
        self._require_frame("next_width")
        return self.set_mutator(NEXT_WIDTH, int(width))

    def next_height(self, height: int) -> "Window":
        self._require_frame("next_height")
        return self.set_mutator(NEXT_HEIGHT, int(height))

    def center(self) -> "Window":
        self._require_frame("center")
        return self.set_mutator(CENTER, True)

    # ---- widget state ----
    def widget_state(self, widget_id: str, default: Any) -> Any:
        return self._state.get(widget_id, default)

    def widget_state_as(self, widget_id: str, cls: type[T], factory: Callable[[], T]) -> T:
        return self._state.get_as(widget_id, cls, factory)

    def text_field_state(self, widget_id: str) -> TextFieldState:
        """`text_field` のキャレット記録（ホストの `widget_state` とは別の表）。"""
        return self._text_fields.setdefault(widget_id, TextFieldState())

    def clear_state(self) -> None:
        self._state.clear()
        self._text_fields.clear()

    # ---- layout ----
    def _get_box(self, height: int) -> Rect:
        self._require_frame("layout")
        width = int(self._mutators.get(NEXT_WIDTH, self._cursor.remaining_width))
        height = int(self._mutators.get(NEXT_HEIGHT, height))
        return self._cursor.place(width, height)

    def same_line(self) -> "Window":
        self._require_frame("same_line")
        self._cursor.same_line()
        return self

    # ---- primitives ----
    def _draw_box(self, rect: Rect) -> None:
        self._buffer.fill(rect, self._bg)
        self._buffer.border(rect, self._fg)

    def _draw_text(self, rect: Rect, text: str) -> None:
        # 中央寄せは行ごとにミューテータを参照する
        for i, line in enumerate(text.split("\n")):
            x = rect.min_x
            if self._mutators.get(CENTER, False):
                x += (rect.width - self._font.measure(line)) // 2
            y = rect.min_y + i * self._font.line_height
            self._font.draw(self._buffer, rect, x, y, line, self._fg)

    # ---- widgets ----
    def text(self, text: str) -> Status:
        rect = self._get_box(WIDGET_HEIGHT)
        self._buffer.fill(rect, self._bg)
        self._draw_text(rect.inset(TEXT_INSET), text)
        return Status(self, rect)

    def box(self) -> Status:
        rect = self._get_box(WIDGET_HEIGHT)
        self._draw_box(rect)
        return Status(self, rect)

    def button(self, widget_id: str, text: str) -> Status:
        rect = self._get_box(WIDGET_HEIGHT)
        self._draw_box(rect)
        st = Status(self, rect, widget_id)
        if st.clicked():
            self.set_focus(widget_id)
        self._draw_text(rect.inset(TEXT_INSET), text)
        return st

    def text_field(self, widget_id: str, text: str) -> tuple[str, Status]:
        """1 行テキスト入力。フォーカス中は今フレームの文字を到着順に適用する。"""
        rect = self._get_box(WIDGET_HEIGHT)
        state = self.text_field_state(widget_id)
        self._draw_box(rect)
        st = Status(self, rect, widget_id)
        if st.clicked():
            self.set_focus(widget_id)
        if st.focused():
            for ch in self._active.chars:
                if ch == BACKSPACE:
                    text = text[:-1]
                else:
                    text += ch
            state.cursor = len(text)
        self._draw_text(rect.inset(TEXT_INSET), text)
        return text, st


__all__ = ["Window", "WIDGET_HEIGHT"]
