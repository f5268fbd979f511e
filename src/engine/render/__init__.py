"""
どこで: `engine.render` サブパッケージ。
何を: ピクセルバッファとグリフ描画（Protocol + 既定ビットマップフォント）を提供。
なぜ: UI ロジック（レイアウト/入力）と画素操作の責務を分離するため。
"""

from .font import GlyphRenderer, RasterFont
from .pixel_buffer import PixelBuffer

__all__ = ["PixelBuffer", "GlyphRenderer", "RasterFont"]
