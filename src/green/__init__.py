"""
どこで: `green` 入口（高レベル公開 API）。
何を: ファサード `Green`・場面 `World`/`Actor`・入力型・画像/数学ヘルパ・実行ランナーを再輸出。
なぜ: 利用者が単一名前空間から World/Actor 定義 → 実行まで完結できるようにするため。

Usage:
    from green import Actor, Green, World, run

    class Player(Actor):
        def act(self, dt):
            g = Green.get_instance()
            if g.is_key_down("d"):
                self.x += 200 * dt
            if g.is_key_down_this_frame(" "):
                self.y -= 40

    class Stage(World):
        def prepare(self):
            self.add_object(Player(image=sprite), 320, 240)

    run(Stage(640, 480))
"""

from .engine.core.actor import Actor
from .engine.core.errors import NoWorldError, SingleInstanceError
from .engine.core.world import World
from .engine.io.input_state import InputKey, InputState, MouseButton
from .green import Green
from .sketch import run_sketch as run
from .sketch import run_sketch as run_sketch
from .util.image import (
    BILINEAR,
    NEAREST_NEIGHBOR,
    TILE,
    ResizeMode,
    create_image,
    invalidate_image,
    load_image,
    resize_bilinear,
    resize_image,
    resize_nn,
    tile_image,
)
from .util.mathutils import (
    cot,
    csc,
    get_digits,
    get_lines_intersect,
    get_points_angle,
    get_points_dist,
    sec,
)

__all__ = [
    # メインAPI
    "Green",
    "World",
    "Actor",
    "run_sketch",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    # 入力
    "InputKey",
    "InputState",
    "MouseButton",
    # 例外
    "SingleInstanceError",
    "NoWorldError",
    # 画像
    "ResizeMode",
    "BILINEAR",
    "NEAREST_NEIGHBOR",
    "TILE",
    "create_image",
    "load_image",
    "invalidate_image",
    "resize_nn",
    "resize_bilinear",
    "tile_image",
    "resize_image",
    # 数学
    "get_points_dist",
    "get_points_angle",
    "get_lines_intersect",
    "csc",
    "sec",
    "cot",
    "get_digits",
]

# バージョン情報
__version__ = "2026.10"
