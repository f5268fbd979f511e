"""
どこで: `engine.ui` の操作結果。
何を: ウィジェット 1 回の呼び出しで得た配置矩形と ID、およびクリック/フォーカス判定。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from engine.core.rect import Rect

if TYPE_CHECKING:
    from .window import Window


@dataclass(frozen=True)
class Status:
    """呼び出し直後にだけ有効な判定結果（保存しないこと）。"""

    window: "Window"
    rect: Rect
    widget_id: str = ""

    def clicked(self) -> bool:
        """今フレームで主ボタンが押され、その位置が矩形内なら True。"""
        inp = self.window.input
        return self.window.mouse_clicked and self.rect.contains(inp.mouse_x, inp.mouse_y)

    def focused(self) -> bool:
        """ID がエンジンのフォーカス ID と一致すれば True（ID なしは常に False）。"""
        return bool(self.widget_id) and self.widget_id == self.window.focus


__all__ = ["Status"]
