from __future__ import annotations

import numpy as np
import pytest

from green import Actor, World
from tests._utils.scene import RecordingActor, RecordingWorld, square


def test_world_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        World(0, 10)
    with pytest.raises(ValueError):
        World(10, -1)


def test_add_object_sets_location_and_calls_hook() -> None:
    w = RecordingWorld()
    log: list = []
    a = RecordingActor("a", log)
    returned = w.add_object(a, 12, 34)
    assert returned is a
    assert (a.x, a.y) == (12.0, 34.0)
    assert a.world is w
    assert a.added == [w]
    assert w.number_of_objects() == 1


def test_add_object_partial_location_keeps_other_axis() -> None:
    w = World(50, 50)
    a = Actor(5, 6)
    w.add_object(a, x=20)
    assert (a.x, a.y) == (20.0, 6.0)


def test_adding_twice_to_same_world_is_idempotent() -> None:
    w = RecordingWorld()
    a = RecordingActor("a", [])
    w.add_object(a)
    w.add_object(a)
    assert w.number_of_objects() == 1
    assert a.added == [w]


def test_moving_actor_between_worlds() -> None:
    w1, w2 = RecordingWorld(), RecordingWorld()
    a = RecordingActor("a", [])
    w1.add_object(a)
    w2.add_object(a)
    assert a.world is w2
    assert w1.number_of_objects() == 0
    assert a.removed == [w1]
    assert a.added == [w1, w2]


def test_remove_object_ignores_foreign_actor() -> None:
    w1, w2 = World(10, 10), World(10, 10)
    a = Actor()
    w1.add_object(a)
    w2.remove_object(a)
    assert a.world is w1
    w1.remove_object(a)
    assert a.world is None
    assert w1.number_of_objects() == 0


def test_remove_objects_accepts_live_list() -> None:
    w = World(10, 10)
    for _ in range(3):
        w.add_object(Actor())
    w.remove_objects(w.get_objects())
    assert w.number_of_objects() == 0


def test_get_objects_filters_by_class_in_paint_order() -> None:
    class Enemy(Actor):
        pass

    w = World(10, 10)
    top = w.add_object(Actor(layer=5))
    e1 = w.add_object(Enemy(layer=0))
    e2 = w.add_object(Enemy(layer=0))
    assert w.get_objects() == [e1, e2, top]
    assert w.get_objects(Enemy) == [e1, e2]


def test_handle_act_runs_world_then_actors_with_dt() -> None:
    log: list = []
    w = RecordingWorld()
    w.add_object(RecordingActor("a", log))
    w.add_object(RecordingActor("b", log))
    w.handle_act(0.5)
    assert w.calls == [("world.act", 0.5)]
    assert log == [("a.act", 0.5), ("b.act", 0.5)]


def test_handle_act_skips_actor_removed_during_iteration() -> None:
    log: list = []
    w = World(10, 10)
    victim = RecordingActor("victim", log)

    class Killer(Actor):
        def act(self, dt: float) -> None:
            w.remove_object(victim)
            w.add_object(RecordingActor("spawned", log))

    w.add_object(Killer())
    w.add_object(victim)
    w.handle_act(0.1)
    # 削除済みは呼ばれず、反復中に追加されたものは次フレームから
    assert log == []
    w.handle_act(0.1)
    assert log == [("spawned.act", 0.1)]


def test_handle_draw_orders_by_layer() -> None:
    log: list = []
    w = RecordingWorld()
    w.add_object(RecordingActor("front", log, layer=2))
    w.add_object(RecordingActor("back", log, layer=-1))
    w.add_object(RecordingActor("mid", log))
    w.handle_draw()
    assert w.calls == [("world.draw",)]
    assert log == [("back.draw",), ("mid.draw",), ("front.draw",)]


def test_get_objects_at_uses_actor_bounds() -> None:
    w = World(100, 100)
    a = w.add_object(Actor(image=square(10)), 50, 50)
    w.add_object(Actor(image=square(4)), 10, 10)
    assert w.get_objects_at(46, 54) == [a]
    assert w.get_objects_at(80, 80) == []


def test_background_color_and_image() -> None:
    w = World(10, 6, background="#FF000080")
    assert w.background_color == pytest.approx((1.0, 0.0, 0.0, 128 / 255))
    assert w.background_image is None

    tile = np.arange(4, dtype=np.uint8).reshape(2, 2)
    w.set_background(tile)
    assert w.background_color is None
    assert w.background_image is not None
    assert w.background_image.shape == (6, 10)
    np.testing.assert_array_equal(w.background_image[4:6, 8:10], tile)

    w.set_background(None)
    assert w.background_image is None and w.background_color is None


def test_canvas_height_follows_bound_host() -> None:
    class Host:
        height = 300

    world = World(40, 200)
    assert world.canvas_height == 200
    world.bind_host(Host())
    assert world.canvas_height == 300
    world.bind_host(None)
    assert world.canvas_height == 200


def test_draw_flips_with_host_height(monkeypatch: pytest.MonkeyPatch) -> None:
    from green.engine.core import actor as actor_mod
    from green.engine.core import world as world_mod

    calls: list[tuple] = []

    def fake_draw(arr, x, y, canvas_height):  # noqa: ANN001
        calls.append((arr.shape, x, y, canvas_height))

    monkeypatch.setattr(world_mod, "draw_image", fake_draw)
    monkeypatch.setattr(actor_mod, "draw_image", fake_draw)

    class Host:
        height = 150

    world = World(20, 100, background=square(4))
    world.add_object(Actor(image=square(2)), 10, 10)
    world.bind_host(Host())
    world.handle_draw()
    assert calls == [((100, 20, 4), 0, 0, 150), ((2, 2, 4), 9.0, 9.0, 150)]
