"""
どこで: `green.common.logging`
何を: `run_sketch` が起動時に適用するログ設定（`GREEN_LOG_LEVEL` / 設定ファイル `logging.level`）。
なぜ: スケッチを単体で動かしたときは World のロードや FPS が INFO で見え、
      ホストアプリへ組み込んだときはホスト側のログ設定を壊さないようにするため。

各モジュールは `logging.getLogger(__name__)` で `green.*` 配下のロガーを使う。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None, default: int = logging.INFO) -> int:
    """レベル指定を int に変換する。

    受理: `"debug"` などの名前（大小文字不問）、数値、`"10"` のような数字文字列
    （YAML でクォートされた値を想定）。不明な値は `default`。
    """
    if level is None:
        return default
    if isinstance(level, str):
        name = level.strip()
        if name.isdigit():
            return int(name)
        lvl = logging.getLevelName(name.upper())
        return lvl if isinstance(lvl, int) else default
    return int(level)


def setup_default_logging(level: int | str | None = "INFO") -> None:
    """ルートロガーが未設定のときだけ basicConfig を適用する。

    ホスト側（テストランナーを含む）が既にハンドラを付けていれば何もしない。
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=resolve_level(level), format=_FORMAT)


__all__ = ["setup_default_logging", "resolve_level"]
