"""
どこで: `engine.core` サブパッケージ。
何を: 矩形 `Rect` とエンジン共通の例外を提供。
なぜ: 描画/入力/UI の各層から依存される最内層を小さく保つため。
"""

from .errors import FrameStateError, WidgetStateTypeError
from .rect import Rect

__all__ = ["Rect", "FrameStateError", "WidgetStateTypeError"]
