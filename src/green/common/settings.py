"""
どこで: `green.common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str | None = None

    # Input
    DEBUG_INPUT: bool = False

    # Runner
    DEFAULT_FPS: int = 60


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `GREEN_LOG_LEVEL`: 未設定なら None（設定ファイル/既定 INFO に委ねる）。
    - `GREEN_DEBUG_INPUT`: 入力イベントを DEBUG ログへ出す。
    - `GREEN_DEFAULT_FPS`: 設定ファイルに fps が無い場合の既定値（1 以上）。
    """
    _settings.LOG_LEVEL = env_str("GREEN_LOG_LEVEL")
    _settings.DEBUG_INPUT = env_bool("GREEN_DEBUG_INPUT", False)
    _settings.DEFAULT_FPS = env_int("GREEN_DEFAULT_FPS", 60, min_value=1) or 60


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
