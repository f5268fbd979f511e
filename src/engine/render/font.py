"""
どこで: `engine.render` のグリフ描画。
何を: `GlyphRenderer` Protocol（幅の計測と描画）と、Pillow でラスタライズする既定実装 `RasterFont`。
なぜ: Window が文字描画の具体実装に依存せず、任意のフォントへ差し替えられるようにするため。

`RasterFont` は Pillow の `ImageDraw.text` を 1bit（アンチエイリアスなし）で描き、
その結果を真偽マスクとしてピクセルバッファへ転写する。(x, y) は行の左上（アセンダ上端）。
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from common.types import RGBA8
from engine.core.rect import Rect

from .pixel_buffer import PixelBuffer

DEFAULT_FONT_SIZE = 8
DEFAULT_LINE_HEIGHT = 8

_MASK_CACHE_LIMIT = 256


class GlyphRenderer(Protocol):
    """文字列の計測と描画を行うインターフェース。"""

    line_height: int

    def measure(self, text: str) -> int:
        """`text` を 1 行として描いたときの幅（px）。"""
        ...

    def draw(
        self, buffer: PixelBuffer, clip: Rect, x: int, y: int, text: str, color: RGBA8
    ) -> None:
        """`text` を (x, y) 起点で描く。`clip` の外側は描かない。"""
        ...


class RasterFont:
    """Pillow フォントによる既定の `GlyphRenderer`。

    引数:
        path: TrueType/OpenType フォントのパス。None なら Pillow 同梱の既定フォント。
        size: フォントサイズ（px）。
        line_height: 行送り（px）。
    """

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        size: int = DEFAULT_FONT_SIZE,
        line_height: int = DEFAULT_LINE_HEIGHT,
    ) -> None:
        if path is None:
            self._font = ImageFont.load_default(size=size)
        else:
            self._font = ImageFont.truetype(str(path), size)
        self.line_height = int(line_height)
        self._masks: dict[str, np.ndarray] = {}

    def measure(self, text: str) -> int:
        if not text:
            return 0
        return int(math.ceil(self._font.getlength(text)))

    def mask(self, text: str) -> np.ndarray:
        """`text` 1 行ぶんの真偽マスク（shape=(h, w)、左上が描画起点）。"""
        cached = self._masks.get(text)
        if cached is not None:
            return cached
        if not text:
            m = np.zeros((0, 0), dtype=bool)
        else:
            _, _, right, bottom = self._font.getbbox(text)
            w = max(int(math.ceil(right)), self.measure(text), 1)
            h = max(int(math.ceil(bottom)), 1)
            img = Image.new("1", (w, h), 0)
            draw = ImageDraw.Draw(img)
            draw.fontmode = "1"
            draw.text((0, 0), text, fill=1, font=self._font)
            m = np.asarray(img, dtype=bool)
        if len(self._masks) >= _MASK_CACHE_LIMIT:
            self._masks.clear()
        self._masks[text] = m
        return m

    def draw(
        self, buffer: PixelBuffer, clip: Rect, x: int, y: int, text: str, color: RGBA8
    ) -> None:
        m = self.mask(text)
        if m.size:
            buffer.blit_mask(x, y, m, color, clip)


__all__ = ["GlyphRenderer", "RasterFont"]
