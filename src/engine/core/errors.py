"""
どこで: `engine.core` の例外定義。
何を: フレームライフサイクル違反とウィジェット状態の型不一致を表す例外。
"""

from __future__ import annotations


class FrameStateError(RuntimeError):
    """`start_frame`/`end_frame` の順序違反、またはフレーム外でのウィジェット呼び出し。

    strict モード（`IMUI_STRICT_FRAMES=1` または `Window(strict=True)`）でのみ送出される。
    """


class WidgetStateTypeError(TypeError):
    """ウィジェット状態ストアの値が要求された型と一致しない場合に送出される。"""


__all__ = ["FrameStateError", "WidgetStateTypeError"]
