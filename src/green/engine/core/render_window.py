"""
どこで: `green.engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（背景クリア/描画コールバック）と、入力イベントの `Green` への転送を提供。
なぜ: ファサード/World 層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(640, 480, bg_color=(1, 1, 1, 1))
    win.bind_input(green)
    win.add_draw_callback(green.handle_draw)
    pyglet.app.run()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pyglet
from pyglet.gl import Config, glClearColor
from pyglet.window import key

from ...util.color import RGBA, normalize_color
from ..io.pyglet_input import forward_key, forward_mouse_button, forward_mouse_motion, forward_scroll

if TYPE_CHECKING:
    from ...green import Green


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Green",
        bg_color: RGBA = (1.0, 1.0, 1.0, 1.0),
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトルバー文字列。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        config = Config(double_buffer=True)
        super().__init__(width=width, height=height, caption=caption, config=config, vsync=True)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._green: Green | None = None

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def bind_input(self, green: Green) -> None:
        """入力イベントの転送先を設定する。"""
        self._green = green

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    # ---- input ----
    def on_key_press(self, symbol, modifiers):  # noqa: ANN001
        if symbol == key.ESCAPE:
            self.close()
            return pyglet.event.EVENT_HANDLED
        if self._green is not None:
            forward_key(self._green, symbol, True)
        return None

    def on_key_release(self, symbol, modifiers):  # noqa: ANN001
        if self._green is not None:
            forward_key(self._green, symbol, False)

    def on_mouse_press(self, x, y, button, modifiers):  # noqa: ANN001
        if self._green is not None:
            forward_mouse_button(self._green, x, y, self.height, button, True)

    def on_mouse_release(self, x, y, button, modifiers):  # noqa: ANN001
        if self._green is not None:
            forward_mouse_button(self._green, x, y, self.height, button, False)

    def on_mouse_motion(self, x, y, dx, dy):  # noqa: ANN001
        if self._green is not None:
            forward_mouse_motion(self._green, x, y, self.height)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):  # noqa: ANN001
        self.on_mouse_motion(x, y, dx, dy)

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):  # noqa: ANN001
        if self._green is not None:
            forward_scroll(self._green, scroll_y)

    # ---- helpers ----
    def set_background_color(self, color: object) -> None:
        """背景色（Hex / RGB(A)）を更新する。次フレームから反映。"""
        self._bg_color = normalize_color(color)
