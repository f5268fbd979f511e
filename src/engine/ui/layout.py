"""
どこで: `engine.ui` のレイアウトカーソル。
何を: 上から下へ流すフローレイアウトと、同一行継続（same_line）の位置管理。
なぜ: ウィジェットごとの配置矩形を、描画順だけから決定できるようにするため。
"""

from __future__ import annotations

from engine.core.rect import Rect


class LayoutCursor:
    """現在位置と「直前ウィジェットの右端/上端」「現在の行の最下端」を保持する。

    - `place` は矩形を返した後、カーソルを次の行頭 (0, 下端) へ進める。
      ただし行内でそれより下まで伸びたウィジェットがあればその下端から始める。
    - `same_line` は直前ウィジェットの右隣へカーソルを戻す。
    """

    def __init__(self, line_width: int):
        self.reset(line_width)

    def reset(self, line_width: int) -> None:
        self.line_width = int(line_width)
        self.x = 0
        self.y = 0
        self.after_x = 0
        self.run_top = 0
        self.line_bottom = 0

    @property
    def remaining_width(self) -> int:
        return self.line_width - self.x

    def place(self, width: int, height: int) -> Rect:
        rect = Rect.from_size(self.x, self.y, width, height)
        self.after_x = rect.max_x
        self.run_top = rect.min_y
        self.x, self.y = 0, rect.max_y
        if self.y < self.line_bottom:
            self.y = self.line_bottom
        return rect

    def same_line(self) -> None:
        if self.line_bottom < self.y:
            self.line_bottom = self.y
        self.y = self.run_top
        self.x = self.after_x


__all__ = ["LayoutCursor"]
