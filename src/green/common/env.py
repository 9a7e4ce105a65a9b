"""
どこで: `green.common.env`
何を: `GREEN_*` 環境変数（ログレベル・入力トレース・既定 FPS）を型付きで読むヘルパ。
なぜ: `settings.reload_from_env()` の読込規則（空白のみは未設定・不正値は既定値へ戻して警告）を
      変数ごとに書き分けずに済ませるため。
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "f", "no", "n", "off"})


def _read(name: str) -> Optional[str]:
    """前後の空白を除いた値（未設定・空白のみは None）。"""
    raw = os.getenv(name)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名（例: `GREEN_DEFAULT_FPS`）。
    default : Optional[int]
        未設定/不正値のときの値。
    min_value : Optional[int]
        下限。下回った値は下限に丸める（FPS の 0 や負値を 1 にする用途）。
    """
    raw = _read(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %r", name, raw, default)
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得する（1/0, true/false, yes/no, on/off。大小文字は不問）。"""
    raw = _read(name)
    if raw is None:
        return bool(default)
    s = raw.lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    try:
        # "2" などの数値は 0 以外を真とする
        return int(s) != 0
    except ValueError:
        logger.warning("%s=%r is not a boolean; using %r", name, raw, bool(default))
        return bool(default)


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """文字列環境変数を取得する（空白のみは未設定扱い）。"""
    raw = _read(name)
    return default if raw is None else raw


__all__ = ["env_int", "env_bool", "env_str"]
