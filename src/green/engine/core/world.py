"""
どこで: `green.engine.core.world`。
何を: 場面を表す `World` 基底クラス。Actor を保持し、act/draw をまとめて駆動する。
なぜ: スケッチ側は World をサブクラス化して `prepare()` で Actor を並べるだけで済むようにするため。

所有関係:
- Actor は高々 1 つの World に属する。別の World へ追加すると元の World からは外れる。
- 描画順は `Actor.layer` の昇順（同じ layer では追加順）。
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, TypeVar

import numpy as np

from ...util.color import RGBA, normalize_color
from ...util.image import draw_image, tile_image
from .actor import Actor

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Actor)


class World:
    """Actor の入れ物となる場面。サブクラスで `prepare` / `act` / `draw` をオーバーライドする。"""

    def __init__(self, width: int, height: int, *, background: Any = None):
        """World を生成する。

        引数:
            width: 幅（ピクセル、1 以上）。
            height: 高さ（ピクセル、1 以上）。
            background: 背景。色（Hex / RGB(A) タプル）または画像配列。
                画像は World サイズへタイル状に敷き詰める。None ならウィンドウ既定色。
        """
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"world size must be positive, got {(width, height)}")
        self.width = int(width)
        self.height = int(height)
        self.background_color: RGBA | None = None
        self.background_image: np.ndarray | None = None
        self._actors: list[Actor] = []
        self._host: Any = None
        self.set_background(background)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}x{self.height}, actors={len(self._actors)})"

    # ---- host ----
    def bind_host(self, host: Any) -> None:
        """描画先のホスト（通常は pyglet ウィンドウ）を結び付ける。`Green.load_world()` が呼ぶ。"""
        self._host = host

    @property
    def canvas_height(self) -> int:
        """描画先の高さ [px]。ホストが `height` を持てばその値、無ければ World の高さ。

        画像の Y 反転はこの値で行う（入力側もウィンドウ高さで反転するため）。
        """
        h = getattr(self._host, "height", None)
        return self.height if h is None else int(h)

    # ---- background ----
    def set_background(self, background: Any) -> None:
        """背景を色または画像で設定する（None で解除）。"""
        self.background_color = None
        self.background_image = None
        if background is None:
            return
        if isinstance(background, np.ndarray):
            self.background_image = tile_image(background, self.width, self.height)
        else:
            self.background_color = normalize_color(background)

    # ---- hooks ----
    def prepare(self) -> None:
        """`Green.load_world()` でロードされた直後に 1 度呼ばれる。"""

    def act(self, dt: float) -> None:
        """1 フレーム分の World 自身の更新（Actor より先に呼ばれる）。"""

    def draw(self) -> None:
        """World 自身の描画（Actor より先に呼ばれる）。既定は背景画像の描画。"""
        if self.background_image is not None:
            draw_image(self.background_image, 0, 0, self.canvas_height)

    # ---- actors ----
    def add_object(self, actor: Actor, x: float | None = None, y: float | None = None) -> Actor:
        """Actor を追加する。`x`/`y` を指定した場合はその位置へ置く。"""
        if x is not None or y is not None:
            actor.set_location(actor.x if x is None else x, actor.y if y is None else y)
        previous = actor.world
        if previous is self:
            return actor
        if previous is not None:
            previous.remove_object(actor)
        self._actors.append(actor)
        actor._world = self
        actor.added_to_world(self)
        return actor

    def remove_object(self, actor: Actor) -> None:
        """Actor を取り除く（この World に属していなければ何もしない）。"""
        if actor.world is not self:
            return
        self._actors.remove(actor)
        actor._world = None
        actor.removed_from_world(self)

    def remove_objects(self, actors: Iterable[Actor]) -> None:
        for actor in list(actors):
            self.remove_object(actor)

    def get_objects(self, cls: type[A] | None = None) -> list[Any]:
        """描画順に並んだ Actor のリスト（`cls` 指定時はそのインスタンスのみ）。"""
        actors = self._paint_order()
        if cls is None:
            return actors
        return [a for a in actors if isinstance(a, cls)]

    def get_objects_at(self, x: float, y: float, cls: type[A] | None = None) -> list[Actor]:
        """点 (x, y) を矩形内に含む Actor を返す。"""
        return [a for a in self.get_objects(cls) if a.contains_point(x, y)]

    def number_of_objects(self) -> int:
        return len(self._actors)

    def _paint_order(self) -> list[Actor]:
        # sorted は安定ソート: 同じ layer は追加順
        return sorted(self._actors, key=lambda a: a.layer)

    # ---- frame ----
    def handle_act(self, dt: float) -> None:
        """World → 各 Actor の順に `act(dt)` を呼ぶ。

        反復中の追加/削除に備えてスナップショットを回し、途中で取り除かれた Actor は飛ばす。
        """
        self.act(dt)
        for actor in list(self._actors):
            if actor.world is self:
                actor.act(dt)

    def handle_draw(self) -> None:
        """World → 各 Actor（layer 昇順）の順に `draw()` を呼ぶ。"""
        self.draw()
        for actor in self._paint_order():
            actor.draw()
