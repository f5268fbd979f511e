"""
どこで: `engine.ui` のミューテータ表。
何を: 名前付きの一回限り上書き値（幅/高さ/中央寄せ）と keep フラグの管理。
なぜ: `next_width(40).button(...)` のように、直後のウィジェット呼び出しだけへ設定を渡すため。

規約:
- `get` は初回読み出しで値を消費する。keep 済みなら keep を解除して 1 回だけ残す。
- フレーム開始時には keep の有無にかかわらず全消去する（`clear`）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

NEXT_WIDTH = "nextwidth"
NEXT_HEIGHT = "nextheight"
CENTER = "center"

# 上書き値は int（幅/高さ）と bool（中央寄せ）に限定する
MutatorValue = int | bool

_D = TypeVar("_D")


@dataclass
class _Entry:
    value: MutatorValue
    keep: bool = False


class MutatorStore:
    """名前 → `_Entry` の一回限り上書きテーブル。"""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def set(self, name: str, value: MutatorValue) -> None:
        """値を登録（既存は上書き、keep は解除）。"""
        if not isinstance(value, (int, bool)):
            raise TypeError(f"mutator '{name}' must be int or bool, got {type(value).__name__}")
        self._entries[name] = _Entry(value)

    def keep(self, name: str) -> None:
        """登録済みなら次の 1 回の読み出しを生き延びさせる。未登録なら何もしない。"""
        entry = self._entries.get(name)
        if entry is not None:
            entry.keep = True

    def get(self, name: str, default: _D) -> MutatorValue | _D:
        entry = self._entries.get(name)
        if entry is None:
            return default
        if entry.keep:
            entry.keep = False
        else:
            del self._entries[name]
        return entry.value

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["MutatorStore", "MutatorValue", "NEXT_WIDTH", "NEXT_HEIGHT", "CENTER"]
