"""
どこで: `engine.core` の矩形型。
何を: 整数ピクセル矩形 `Rect`（半開区間 [min, max)）と inset/intersect/contains を提供。
なぜ: レイアウト・描画のクリップ・ヒットテストを同じ境界規約で扱うため。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """左上原点・y 下向きの整数矩形。

    - `min` を含み `max` を含まない（半開区間）。
    - 幅/高さが 0 以下の矩形は「空」。描画もヒットもしない。
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> "Rect":
        return cls(int(x), int(y), int(x) + int(width), int(y) + int(height))

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def empty(self) -> bool:
        return self.min_x >= self.max_x or self.min_y >= self.max_y

    @property
    def center(self) -> tuple[int, int]:
        return ((self.min_x + self.max_x) // 2, (self.min_y + self.max_y) // 2)

    def contains(self, x: int, y: int) -> bool:
        """点 (x, y) が矩形内にあるか（min 含む/max 含まない）。"""
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def inset(self, n: int) -> "Rect":
        """各辺を `n` だけ内側へ寄せた矩形。

        幅（高さ）が `2n` 未満の軸は中心の 1 点へ潰す（負の大きさにはしない）。
        """
        min_x, max_x = self.min_x, self.max_x
        min_y, max_y = self.min_y, self.max_y
        if self.width < 2 * n:
            min_x = max_x = (self.min_x + self.max_x) // 2
        else:
            min_x += n
            max_x -= n
        if self.height < 2 * n:
            min_y = max_y = (self.min_y + self.max_y) // 2
        else:
            min_y += n
            max_y -= n
        return Rect(min_x, min_y, max_x, max_y)

    def intersect(self, other: "Rect") -> "Rect":
        """共通部分。重ならなければ `Rect(0, 0, 0, 0)`。"""
        r = Rect(
            max(self.min_x, other.min_x),
            max(self.min_y, other.min_y),
            min(self.max_x, other.max_x),
            min(self.max_y, other.max_y),
        )
        if r.empty:
            return Rect(0, 0, 0, 0)
        return r


__all__ = ["Rect"]
