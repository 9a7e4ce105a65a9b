"""
どこで: `green.engine.io.input_state`。
何を: キーボード/マウスの「押下中」集合と、フレーム単位の「このフレームで押された/離された」集合、
      マウス位置・ホイール量を保持する `InputState`。
なぜ: ホスト（pyglet）のイベントをフレーム境界で整理し、押した瞬間/離した瞬間を
      ポーリングで判定できるようにするため。

不変条件:
- 押下中集合に「無い→有る」へ遷移したときだけ pressed（このフレームで押された）に入る。
- 押下中集合に「有る→無い」へ遷移したときだけ released（このフレームで離された）に入る。
  キーリピートで同じキーの押下イベントが重なっても pressed には再登録しない。
- `begin_frame()` は pressed/released とホイール量だけを消す。押下中集合とマウス位置は残る。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Union

from ...common import settings

logger = logging.getLogger(__name__)


class MouseButton(IntEnum):
    """マウスボタン。値は `pyglet.window.mouse` の定数と同じ。"""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 4
    CENTER = 2  # MIDDLE の別名


@dataclass(frozen=True)
class InputKey:
    """キー 1 つの識別子。文字 `key`（特殊キーは None）とキーコード `key_code` の組で比較する。"""

    key: str | None
    key_code: int

    def __post_init__(self) -> None:
        if self.key is not None and len(self.key) != 1:
            raise ValueError(f"key must be a single character or None, got {self.key!r}")


KeyQuery = Union[str, int, InputKey]


def matches(keys: Iterable[InputKey], query: KeyQuery) -> bool:
    """`keys` に `query` と一致するキーがあるかを返す。

    - `str`: 文字 (`InputKey.key`) で照合
    - `int`: キーコード (`InputKey.key_code`) で照合
    - `InputKey`: 完全一致
    """
    if isinstance(query, InputKey):
        return query in keys
    # bool は int のサブクラスなので先に弾く
    if isinstance(query, bool):
        raise TypeError("key query must be str, int or InputKey, not bool")
    if isinstance(query, str):
        return any(k.key == query for k in keys)
    if isinstance(query, int):
        return any(k.key_code == query for k in keys)
    raise TypeError(f"key query must be str, int or InputKey, got {type(query).__name__}")


@dataclass
class InputState:
    """1 フレーム分の入力状態。"""

    mouse_buttons_down: set[int] = field(default_factory=set)
    mouse_buttons_pressed: set[int] = field(default_factory=set)
    mouse_buttons_released: set[int] = field(default_factory=set)
    keys_down: set[InputKey] = field(default_factory=set)
    keys_pressed: set[InputKey] = field(default_factory=set)
    keys_released: set[InputKey] = field(default_factory=set)
    mouse_x: int = 0
    mouse_y: int = 0
    pmouse_x: int = 0
    pmouse_y: int = 0
    mouse_scroll: int = 0

    # ---- frame ----
    def begin_frame(self) -> None:
        """フレーム単位の状態（pressed/released/ホイール量）を消去し、現在位置を前回位置へ繰り越す。"""
        self.mouse_buttons_pressed.clear()
        self.mouse_buttons_released.clear()
        self.mouse_scroll = 0
        self.keys_pressed.clear()
        self.keys_released.clear()
        self.pmouse_x = self.mouse_x
        self.pmouse_y = self.mouse_y

    # ---- mouse ----
    def press_mouse(self, button: int) -> None:
        if button not in self.mouse_buttons_down:
            self.mouse_buttons_pressed.add(button)
        self.mouse_buttons_down.add(button)
        self._trace("mouse down %s", button)

    def release_mouse(self, button: int) -> None:
        if button in self.mouse_buttons_down:
            self.mouse_buttons_released.add(button)
        self.mouse_buttons_down.discard(button)
        self._trace("mouse up %s", button)

    def move_mouse(self, x: int, y: int, px: int | None = None, py: int | None = None) -> None:
        """マウス位置を更新する。

        前回位置を省略した場合はフレーム開始時の位置を保つため、
        1 フレーム内に複数回動いても前回位置 → 最終位置の移動量になる。
        """
        if px is not None:
            self.pmouse_x = int(px)
        if py is not None:
            self.pmouse_y = int(py)
        self.mouse_x = int(x)
        self.mouse_y = int(y)

    def scroll(self, count: int) -> None:
        # 同一フレーム内では最後の値を採用
        self.mouse_scroll = int(count)
        self._trace("mouse wheel %s", count)

    def is_mouse_moving(self) -> bool:
        return self.pmouse_x != self.mouse_x or self.pmouse_y != self.mouse_y

    def mouse_distance(self) -> float:
        """前回位置から現在位置までの距離 [px]。"""
        return math.hypot(self.mouse_x - self.pmouse_x, self.mouse_y - self.pmouse_y)

    # ---- keys ----
    def press_key(self, key: InputKey) -> None:
        if key not in self.keys_down:
            self.keys_pressed.add(key)
        self.keys_down.add(key)
        self._trace("key down %s", key)

    def release_key(self, key: InputKey) -> None:
        if key in self.keys_down:
            self.keys_released.add(key)
        self.keys_down.discard(key)
        self._trace("key up %s", key)

    def _trace(self, msg: str, *args: object) -> None:
        if settings.get().DEBUG_INPUT:
            logger.debug(msg, *args)


__all__ = ["MouseButton", "InputKey", "InputState", "KeyQuery", "matches"]
