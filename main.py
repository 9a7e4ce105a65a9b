from __future__ import annotations

import math

import numpy as np

from green import NEAREST_NEIGHBOR, Actor, Green, MouseButton, World, create_image, resize_image, run

WIDTH, HEIGHT = 480, 360

# 4x4 のドット絵を最近傍で 8 倍に拡大（くっきり保つ）
_PIXELS = np.array(
    [
        [0, 1, 1, 0],
        [1, 2, 2, 1],
        [1, 2, 2, 1],
        [0, 1, 1, 0],
    ]
)
_PALETTE = np.array([[0, 0, 0, 0], [30, 120, 40, 255], [140, 220, 90, 255]], dtype=np.uint8)
SPRITE = resize_image(_PALETTE[_PIXELS], 32, 0, NEAREST_NEIGHBOR)


def _checker_tile() -> np.ndarray:
    tile = create_image(16, 16, fill="#F4F4EC")
    tile[:8, :8] = tile[8:, 8:] = (232, 232, 220, 255)
    return tile


class Player(Actor):
    SPEED = 160.0

    def act(self, dt: float) -> None:
        g = Green.get_instance()
        dx = g.is_key_down("d") - g.is_key_down("a")
        dy = g.is_key_down("s") - g.is_key_down("w")
        if dx or dy:
            self.rotation = math.atan2(dy, dx)
            self.move(self.SPEED * dt)
        if g.is_key_down_this_frame(" "):
            self.world.add_object(Seed(image=SPRITE[::2, ::2], rotation=self.rotation), self.x, self.y)


class Seed(Actor):
    def act(self, dt: float) -> None:
        self.move(240 * dt)
        if self.is_at_edge():
            self.world.remove_object(self)


class Garden(World):
    def prepare(self) -> None:
        self.add_object(Player(image=SPRITE, layer=1), WIDTH / 2, HEIGHT / 2)

    def act(self, dt: float) -> None:
        g = Green.get_instance()
        if g.is_mouse_button_down_this_frame(MouseButton.LEFT):
            self.add_object(Actor(image=SPRITE), g.mouse_x, g.mouse_y)
        if g.is_mouse_scrolling():
            for actor in self.get_objects(Seed):
                actor.turn(0.2 * g.get_mouse_scroll())


if __name__ == "__main__":
    run(lambda: Garden(WIDTH, HEIGHT, background=_checker_tile()), fps=60)
