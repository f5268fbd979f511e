"""
どこで: `common` パッケージ。
何を: 設定・環境変数・ロギング・型エイリアスなど、全層で使う軽量基盤。
なぜ: engine/api から再利用する共通部分を分離し、依存の向きを内側へ揃えるため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
