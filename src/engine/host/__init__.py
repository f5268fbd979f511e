"""
どこで: `engine.host` サブパッケージ。
何を: デスクトップホスト（pyglet）とイベント変換ヘルパ。
なぜ: エンジン本体を GUI ツールキットから独立させたまま、実ウィンドウで動かせるようにするため。

`pyglet_host` は import 時に pyglet を読み込むため、ここでは再輸出しない。
"""

from .events import flip_y, motion_to_char, text_to_chars, to_engine_button

__all__ = ["flip_y", "motion_to_char", "text_to_chars", "to_engine_button"]
