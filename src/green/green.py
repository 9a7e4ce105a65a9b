"""
どこで: `green.green`（ライブラリの中心ファサード）。
何を: プロセスに 1 つだけの `Green` が、現在の World・フレーム時間・入力状態を保持し、
      ホスト（pyglet ウィンドウ/クロック）のコールバックを World/Actor へ中継する。
なぜ: World の実装に依存しない形で act/draw/入力処理を呼び出せる窓口を 1 つにまとめるため。

典型的な呼び出し順（1 フレーム）:
    1) ホストのイベント → handle_key_down / handle_mouse_down / handle_mouse_position ...
    2) handle_act()   … デルタ時間を更新し、World → Actor の act(dt)
    3) handle_input() … このフレームの押下/解放/ホイール量を消去（次フレームの受付開始）
    4) handle_draw()  … World → Actor の draw()

`green.sketch.run_sketch` はこの順序で自動的に結線する。自前のループから使う場合は
2) と 3) をまとめた `tick(dt)` を呼べばよい。
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, ClassVar

import numpy as np

from .engine.core.errors import NoWorldError, SingleInstanceError
from .engine.core.world import World
from .engine.io.input_state import InputKey, InputState, KeyQuery, matches
from .util import image as _image
from .util import mathutils as _math

logger = logging.getLogger(__name__)


class Green:
    """入力・時間・World を束ねるシングルトン。

    `run_sketch` を使わない場合は、ホストの初期化時に 1 度だけ `Green(window)` を生成する。
    2 度目の生成は `SingleInstanceError`。
    """

    _instance: ClassVar[Green | None] = None
    _current_world: ClassVar[World | None] = None

    # 画像リサイズのアルゴリズム指定
    BILINEAR: ClassVar[int] = _image.BILINEAR
    NEAREST_NEIGHBOR: ClassVar[int] = _image.NEAREST_NEIGHBOR
    TILE: ClassVar[int] = _image.TILE

    # 数学ヘルパ（インスタンス無しで使える）
    get_points_dist = staticmethod(_math.get_points_dist)
    get_points_angle = staticmethod(_math.get_points_angle)
    get_lines_intersect = staticmethod(_math.get_lines_intersect)
    csc = staticmethod(_math.csc)
    sec = staticmethod(_math.sec)
    cot = staticmethod(_math.cot)
    get_digits = staticmethod(_math.get_digits)

    def __init__(self, parent: Any = None, *, time_source: Callable[[], float] | None = None):
        """ファサードを生成する。

        引数:
            parent: ホスト（通常は pyglet ウィンドウ）。`parent` で参照できる。
            time_source: 秒を返す単調増加クロック。既定は `time.perf_counter`。
        """
        if Green._instance is not None:
            raise SingleInstanceError()
        Green._instance = self
        self._parent = parent
        self._time_source = time_source or time.perf_counter
        self._last_time = self._time_source()
        # フレーム内で何度読んでも同じ値になるよう、act 時に 1 度だけ計算して保持する
        self._delta_time = 0.0
        self._input = InputState()
        logger.debug("Green created (parent=%r)", parent)

    # ---- singleton / world ----
    @classmethod
    def get_instance(cls) -> Green | None:
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """シングルトンと現在の World を破棄する（終了処理/テスト用）。

        ウィンドウと共に GL コンテキストも破棄されるため、テクスチャキャッシュも空にする。
        """
        cls._instance = None
        cls._current_world = None
        _image.clear_textures()

    @classmethod
    def get_world(cls) -> World | None:
        """現在ロードされている World（未ロードなら None）。"""
        return cls._current_world

    # ---- getters ----
    @property
    def parent(self) -> Any:
        return self._parent

    @property
    def delta_time(self) -> float:
        """前フレームからの経過時間 [sec]。`handle_act()` ごとに更新される。"""
        return self._delta_time

    @property
    def input(self) -> InputState:
        return self._input

    # ---- base ----
    def load_world(self, world: World) -> None:
        """World を現在の World にして `prepare()` を呼ぶ。

        World を親ウィンドウへ結び付け（描画の Y 反転に使う）、World が背景色を持つ場合は
        その色をウィンドウへ反映する。
        """
        Green._current_world = world
        world.bind_host(self._parent)
        set_bg = getattr(self._parent, "set_background_color", None)
        if set_bg is not None and world.background_color is not None:
            set_bg(world.background_color)
        logger.info("loaded world %r", world)
        world.prepare()

    def handle_draw(self) -> None:
        """現在の World とその Actor を描画する。World 未ロードなら `NoWorldError`。"""
        world = Green.get_world()
        if world is None:
            raise NoWorldError()
        world.handle_draw()

    def handle_act(self) -> None:
        """デルタ時間を更新し、現在の World とその Actor の `act(dt)` を呼ぶ。

        World 未ロードなら `NoWorldError`（デルタ時間の更新は先に行う）。
        """
        now = self._time_source()
        self._delta_time = now - self._last_time
        self._last_time = now
        world = Green.get_world()
        if world is None:
            raise NoWorldError()
        world.handle_act(self._delta_time)

    def handle_input(self) -> None:
        """フレーム単位の入力状態（押下/解放/ホイール量）を消去し、現在のマウス位置を前回位置にする。"""
        self._input.begin_frame()

    def tick(self, dt: float) -> None:
        """`Tickable` 実装。act の後に入力フレームを進める（`dt` は自前計測するため未使用）。"""
        self.handle_act()
        self.handle_input()

    # ---- mouse input ----
    def handle_mouse_down(self, mouse_button: int) -> None:
        self._input.press_mouse(mouse_button)

    def handle_mouse_up(self, mouse_button: int) -> None:
        self._input.release_mouse(mouse_button)

    def handle_mouse_position(
        self,
        mouse_x: int,
        mouse_y: int,
        pmouse_x: int | None = None,
        pmouse_y: int | None = None,
    ) -> None:
        """マウス位置（左上原点）を更新する。前回位置を省略するとフレーム開始時の位置のまま。"""
        self._input.move_mouse(mouse_x, mouse_y, pmouse_x, pmouse_y)

    def handle_mouse_wheel(self, mouse_scroll: int) -> None:
        """このフレームのホイール量（手前方向が正）を設定する。"""
        self._input.scroll(mouse_scroll)

    @property
    def mouse_x(self) -> int:
        return self._input.mouse_x

    @property
    def mouse_y(self) -> int:
        return self._input.mouse_y

    @property
    def pmouse_x(self) -> int:
        return self._input.pmouse_x

    @property
    def pmouse_y(self) -> int:
        return self._input.pmouse_y

    def is_mouse_moving(self) -> bool:
        return self._input.is_mouse_moving()

    def get_mouse_speed(self) -> float:
        """前フレームから今フレームへのマウス速度 [px/sec]（フレーム間隔依存の目安値）。"""
        if self._delta_time <= 0.0:
            return 0.0
        return self._input.mouse_distance() / self._delta_time

    def is_mouse_button_down(self, mouse_button: int) -> bool:
        return mouse_button in self._input.mouse_buttons_down

    def is_mouse_button_down_this_frame(self, mouse_button: int) -> bool:
        return mouse_button in self._input.mouse_buttons_pressed

    def is_mouse_button_up_this_frame(self, mouse_button: int) -> bool:
        return mouse_button in self._input.mouse_buttons_released

    def get_mouse_scroll(self) -> int:
        return self._input.mouse_scroll

    def is_mouse_scrolling(self) -> bool:
        return self._input.mouse_scroll != 0

    # ---- key input ----
    def handle_key_down(self, key: str | None, key_code: int) -> None:
        self._input.press_key(InputKey(key, key_code))

    def handle_key_up(self, key: str | None, key_code: int) -> None:
        self._input.release_key(InputKey(key, key_code))

    def is_key_down(self, key: KeyQuery) -> bool:
        """キーが押下中か。`key` は文字 / キーコード / `InputKey`。"""
        return matches(self._input.keys_down, key)

    def is_key_down_this_frame(self, key: KeyQuery) -> bool:
        return matches(self._input.keys_pressed, key)

    def is_key_up_this_frame(self, key: KeyQuery) -> bool:
        return matches(self._input.keys_released, key)

    # ---- image utilities ----
    def resize_nn(self, src: Any, w: float, h: float) -> np.ndarray:
        return _image.resize_nn(src, w, h)

    def tile_image(self, src: Any, w: float, h: float) -> np.ndarray:
        return _image.tile_image(src, w, h)

    def resize_image(self, src: Any, w: float, h: float, mode: int = _image.BILINEAR) -> np.ndarray:
        return _image.resize_image(src, w, h, mode)
