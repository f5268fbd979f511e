"""
どこで: `engine.render` のピクセルバッファ。
何を: RGBA8 の 2 次元グリッド（numpy `uint8`, shape=(H, W, 4)）と矩形塗り/枠線/マスク転写。
なぜ: Window が描く先を 1 つの配列に集約し、フレーム終了時に読み取り専用ビューで渡すため。
"""

from __future__ import annotations

import numpy as np

from common.types import RGBA8
from engine.core.rect import Rect


class PixelBuffer:
    """左上原点・y 下向きの RGBA8 ピクセル配列。範囲外への描画は黙って切り捨てる。"""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"buffer size must be non-negative: {width}x{height}")
        self._data = np.zeros((int(height), int(width), 4), dtype=np.uint8)

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def view(self) -> np.ndarray:
        """コピーせずに読み取り専用ビューを返す（次の `clear` で内容が変わる）。"""
        v = self._data.view()
        v.flags.writeable = False
        return v

    def pixel(self, x: int, y: int) -> RGBA8:
        r, g, b, a = (int(c) for c in self._data[y, x])
        return (r, g, b, a)

    def clear(self, color: RGBA8) -> None:
        self._data[:, :] = color

    def fill(self, rect: Rect, color: RGBA8) -> None:
        r = rect.intersect(self.bounds)
        if r.empty:
            return
        self._data[r.min_y : r.max_y, r.min_x : r.max_x] = color

    def set(self, x: int, y: int, color: RGBA8) -> None:
        if self.bounds.contains(x, y):
            self._data[y, x] = color

    def border(self, rect: Rect, color: RGBA8) -> None:
        """`rect` の外周 1px を `color` で描く。2px 未満の軸では枠が内部を上書きする。"""
        if rect.empty:
            return
        self.fill(Rect(rect.min_x, rect.min_y, rect.max_x, rect.min_y + 1), color)
        self.fill(Rect(rect.min_x, rect.max_y - 1, rect.max_x, rect.max_y), color)
        self.fill(Rect(rect.min_x, rect.min_y, rect.min_x + 1, rect.max_y), color)
        self.fill(Rect(rect.max_x - 1, rect.min_y, rect.max_x, rect.max_y), color)

    def blit_mask(self, x: int, y: int, mask: np.ndarray, color: RGBA8, clip: Rect) -> None:
        """真偽マスク（shape=(h, w)）の True 画素を (x, y) 起点で `color` に塗る。

        `clip` とバッファ境界の共通部分の外側は描かない。
        """
        h, w = mask.shape
        r = Rect(x, y, x + w, y + h).intersect(clip).intersect(self.bounds)
        if r.empty:
            return
        sub = self._data[r.min_y : r.max_y, r.min_x : r.max_x]
        m = mask[r.min_y - y : r.max_y - y, r.min_x - x : r.max_x - x]
        sub[m] = color


__all__ = ["PixelBuffer"]
