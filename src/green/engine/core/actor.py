"""
どこで: `green.engine.core.actor`。
何を: スケッチ側でサブクラス化して使う `Actor` 基底クラス（位置/回転/画像/移動/当たり判定）。
なぜ: Greenfoot 流に「act で更新・draw で描画」するゲームオブジェクトを最小記述で書けるようにするため。

座標は左上原点・Y 下向き、(x, y) は Actor の中心。回転はラジアン。
当たり判定は画像サイズの軸並行矩形（回転は考慮しない）。
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from ...util.image import draw_image
from ...util.mathutils import get_points_angle, get_points_dist
from .errors import NoWorldError

if TYPE_CHECKING:
    from .world import World

A = TypeVar("A", bound="Actor")


class Actor:
    """World に配置されるオブジェクトの基底クラス。

    サブクラスで `act(dt)` / `draw()` をオーバーライドする。
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        *,
        image: Any = None,
        rotation: float = 0.0,
        layer: int = 0,
    ):
        self.x = float(x)
        self.y = float(y)
        self.rotation = float(rotation)
        self.layer = int(layer)
        self._image: np.ndarray | None = None
        self._world: World | None = None
        self.image = image

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:g}, y={self.y:g}, rotation={self.rotation:g})"

    # ---- properties ----
    @property
    def world(self) -> World | None:
        """所属している World（未所属なら None）。"""
        return self._world

    @property
    def image(self) -> np.ndarray | None:
        return self._image

    @image.setter
    def image(self, value: Any) -> None:
        if value is None:
            self._image = None
            return
        arr = np.asarray(value)
        if arr.ndim not in (2, 3):
            raise ValueError(f"actor image must be (H, W) or (H, W, C), got shape {arr.shape}")
        self._image = arr

    @property
    def width(self) -> int:
        return 0 if self._image is None else int(self._image.shape[1])

    @property
    def height(self) -> int:
        return 0 if self._image is None else int(self._image.shape[0])

    # ---- hooks ----
    def added_to_world(self, world: World) -> None:
        """World に追加された直後に呼ばれる。"""

    def removed_from_world(self, world: World) -> None:
        """World から取り除かれた直後に呼ばれる。"""

    def act(self, dt: float) -> None:
        """1 フレーム分の更新。`dt` は前フレームからの経過秒。"""

    def draw(self) -> None:
        """既定では画像を中心 (x, y) に合わせて描画する（画像が無ければ何もしない）。"""
        if self._image is None:
            return
        world = self._require_world()
        draw_image(
            self._image, self.x - self.width / 2, self.y - self.height / 2, world.canvas_height
        )

    # ---- movement ----
    def set_location(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def move(self, distance: float) -> None:
        """現在の向き（rotation）へ `distance` だけ進む。"""
        self.x += math.cos(self.rotation) * distance
        self.y += math.sin(self.rotation) * distance

    def turn(self, angle: float) -> None:
        self.rotation += float(angle)

    def turn_towards(self, x: float, y: float) -> None:
        """点 (x, y) の方を向く。"""
        self.rotation = get_points_angle(self.x, self.y, x, y)

    # ---- geometry ----
    def get_bounds(self) -> tuple[float, float, float, float]:
        """(left, top, right, bottom) の軸並行矩形。"""
        hw = self.width / 2
        hh = self.height / 2
        return (self.x - hw, self.y - hh, self.x + hw, self.y + hh)

    def contains_point(self, x: float, y: float) -> bool:
        left, top, right, bottom = self.get_bounds()
        return left <= x < right and top <= y < bottom

    def intersects(self, other: Actor) -> bool:
        """矩形同士が重なっているか（辺が接するだけなら重ならない）。"""
        if other is self:
            return False
        l1, t1, r1, b1 = self.get_bounds()
        l2, t2, r2, b2 = other.get_bounds()
        return l1 < r2 and l2 < r1 and t1 < b2 and t2 < b1

    def get_distance_to(self, x: float, y: float) -> float:
        return get_points_dist(self.x, self.y, x, y)

    # ---- world queries ----
    def get_intersecting_objects(self, cls: type[A] | None = None) -> list[A]:
        world = self._require_world()
        return [a for a in world.get_objects(cls) if a is not self and self.intersects(a)]

    def is_touching(self, cls: type[Actor] | None = None) -> bool:
        return bool(self.get_intersecting_objects(cls))

    def get_objects_in_range(self, radius: float, cls: type[A] | None = None) -> list[A]:
        """中心間距離が `radius` 以下の他 Actor を返す。"""
        world = self._require_world()
        return [
            a
            for a in world.get_objects(cls)
            if a is not self and self.get_distance_to(a.x, a.y) <= radius
        ]

    def is_at_edge(self) -> bool:
        """中心が World の端（または外側）にあるか。"""
        world = self._require_world()
        return self.x <= 0 or self.y <= 0 or self.x >= world.width - 1 or self.y >= world.height - 1

    def _require_world(self) -> World:
        if self._world is None:
            raise NoWorldError(f"{self!r} is not in a World")
        return self._world
