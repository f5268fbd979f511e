"""
どこで: `engine.io` サブパッケージ（入力）。
何を: ホストイベントの蓄積（PendingInput）とフレーム単位の不変スナップショット（InputSnapshot）。
なぜ: 入力デバイス依存を隔離し、UI からは確定済みのスナップショットだけを参照させるため。
"""

from .input import BACKSPACE, InputSnapshot, MouseButton, PendingInput

__all__ = ["BACKSPACE", "InputSnapshot", "MouseButton", "PendingInput"]
