"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # フレームライフサイクル
    STRICT_FRAMES: bool = False

    # 入力
    DEBUG_INPUT: bool = False

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、文字列は `env_str` を使用。
    """
    _settings.STRICT_FRAMES = env_bool("IMUI_STRICT_FRAMES", False)
    _settings.DEBUG_INPUT = env_bool("IMUI_DEBUG_INPUT", False)
    _settings.LOG_LEVEL = env_str("IMUI_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
