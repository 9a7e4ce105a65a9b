"""
どこで: `green.engine.io.pyglet_input`。
何を: pyglet のイベント引数（キーシンボル、左下原点の Y、スクロール量）を
      `Green` が扱う語彙（`InputKey`、左上原点の Y、Processing 流のホイール量）へ変換する純粋関数。
      あわせて、ウィンドウイベントを `Green` の handle_* 呼び出しへ転送する関数も置く。
なぜ: ウィンドウ生成なしでテストでき、`RenderWindow` のハンドラを薄く保つため。
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .input_state import InputKey

if TYPE_CHECKING:
    from ...green import Green

# pyglet のキーシンボルは印字可能 ASCII では文字コードと一致する（key.A == ord("a")）
_PRINTABLE = range(32, 127)


def key_from_symbol(symbol: int) -> InputKey:
    """pyglet のキーシンボルから `InputKey` を作る（特殊キーは key=None）。"""
    code = int(symbol)
    char = chr(code) if code in _PRINTABLE else None
    return InputKey(char, code)


def flip_y(y: int, height: int) -> int:
    """左下原点の Y を左上原点の Y に変換する。"""
    return int(height) - 1 - int(y)


def scroll_count(scroll_y: float) -> int:
    """pyglet の `scroll_y`（上方向が正）を、手前方向が正の整数ホイール量へ変換する。

    トラックパッドの 1 未満の小数も 0 に潰さず、符号方向へ切り上げる。
    """
    v = -float(scroll_y)
    if v == 0.0:
        return 0
    return int(math.copysign(math.ceil(abs(v)), v))


# ---- イベント転送（RenderWindow のハンドラ本体） ----------------------------
def forward_key(green: Green, symbol: int, pressed: bool) -> None:
    k = key_from_symbol(symbol)
    if pressed:
        green.handle_key_down(k.key, k.key_code)
    else:
        green.handle_key_up(k.key, k.key_code)


def forward_mouse_motion(green: Green, x: int, y: int, height: int) -> None:
    """現在位置だけを渡す。前回位置はフレーム開始時の位置（`InputState.begin_frame` が繰り越す）。"""
    green.handle_mouse_position(x, flip_y(y, height))


def forward_mouse_button(green: Green, x: int, y: int, height: int, button: int, pressed: bool) -> None:
    """クリック位置を先に反映してからボタン状態を更新する（移動イベントなしのクリックに備える）。"""
    forward_mouse_motion(green, x, y, height)
    if pressed:
        green.handle_mouse_down(button)
    else:
        green.handle_mouse_up(button)


def forward_scroll(green: Green, scroll_y: float) -> None:
    green.handle_mouse_wheel(scroll_count(scroll_y))


__all__ = [
    "key_from_symbol",
    "flip_y",
    "scroll_count",
    "forward_key",
    "forward_mouse_motion",
    "forward_mouse_button",
    "forward_scroll",
]
