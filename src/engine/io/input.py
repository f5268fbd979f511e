"""
どこで: `engine.io` の入力レコード。
何を: ホストからのキー/マウス/文字イベントを溜める `PendingInput` と、
      フレーム中に参照する不変スナップショット `InputSnapshot`。
なぜ: イベント到着（随時）とウィジェット判定（フレーム単位）を二重バッファで切り離すため。

使用例:
    pending = PendingInput()
    pending.mouse_pos(10, 20)
    pending.mouse_down(MouseButton.LEFT)
    active = pending.snapshot()
    pending.clear_transients()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from common.settings import get as _get_settings

logger = logging.getLogger(__name__)

BACKSPACE = "\b"


class MouseButton(IntEnum):
    """ホストのボタン番号。主ボタン（LEFT）のみ状態を保持する。"""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


@dataclass(frozen=True)
class InputSnapshot:
    """1 フレームぶんの入力（不変）。"""

    keys: frozenset[int] = field(default_factory=frozenset)
    key_triggers: frozenset[int] = field(default_factory=frozenset)
    chars: tuple[str, ...] = ()
    mouse_x: int = 0
    mouse_y: int = 0
    mouse_left: bool = False


class PendingInput:
    """次フレーム開始までに届いたイベントを蓄積する可変レコード。

    - キー押下は保持集合とトリガ集合の両方へ追加、解放は保持集合からのみ除去。
    - 文字は到着順の列として保持（同一フレーム内の重複もそのまま残す）。
    - `clear_transients()` はトリガと文字だけを消し、保持キーとマウス状態は残す。
    """

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._key_triggers: set[int] = set()
        self._chars: list[str] = []
        self._mouse_x = 0
        self._mouse_y = 0
        self._mouse_left = False

    def _trace(self, msg: str, *args: object) -> None:
        if _get_settings().DEBUG_INPUT:
            logger.debug(msg, *args)

    @property
    def mouse_left(self) -> bool:
        return self._mouse_left

    def mouse_pos(self, x: int, y: int) -> None:
        self._mouse_x, self._mouse_y = int(x), int(y)
        self._trace("mouse_pos (%d, %d)", self._mouse_x, self._mouse_y)

    def mouse_down(self, button: int) -> None:
        if button == MouseButton.LEFT:
            self._mouse_left = True
        self._trace("mouse_down %d", button)

    def mouse_up(self, button: int) -> None:
        if button == MouseButton.LEFT:
            self._mouse_left = False
        self._trace("mouse_up %d", button)

    def key_down(self, key: int) -> None:
        self._keys.add(int(key))
        self._key_triggers.add(int(key))
        self._trace("key_down %d", key)

    def key_up(self, key: int) -> None:
        self._keys.discard(int(key))
        self._trace("key_up %d", key)

    def char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"expected a single code point, got {ch!r}")
        self._chars.append(ch)
        self._trace("char %r", ch)

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            keys=frozenset(self._keys),
            key_triggers=frozenset(self._key_triggers),
            chars=tuple(self._chars),
            mouse_x=self._mouse_x,
            mouse_y=self._mouse_y,
            mouse_left=self._mouse_left,
        )

    def clear_transients(self) -> None:
        self._key_triggers.clear()
        self._chars.clear()


__all__ = ["BACKSPACE", "MouseButton", "InputSnapshot", "PendingInput"]
