from __future__ import annotations

import pytest

from green import Green, InputKey, MouseButton, NoWorldError, SingleInstanceError
from tests._utils.scene import RecordingActor, RecordingWorld


def test_singleton(green: Green) -> None:
    assert Green.get_instance() is green
    with pytest.raises(SingleInstanceError):
        Green()
    Green.reset_instance()
    assert Green.get_instance() is None
    assert Green.get_world() is None


def test_parent_is_exposed(clock) -> None:  # noqa: ANN001
    host = object()
    g = Green(host, time_source=clock)
    assert g.parent is host


def test_load_world_prepares_and_replaces(green: Green) -> None:
    w1, w2 = RecordingWorld(), RecordingWorld()
    green.load_world(w1)
    assert Green.get_world() is w1
    assert w1.prepared == 1
    green.load_world(w2)
    assert Green.get_world() is w2
    assert w2.prepared == 1


def test_load_world_pushes_background_color_to_parent(clock) -> None:  # noqa: ANN001
    class Host:
        def __init__(self) -> None:
            self.colors: list[object] = []

        def set_background_color(self, color: object) -> None:
            self.colors.append(color)

    host = Host()
    g = Green(host, time_source=clock)
    g.load_world(RecordingWorld())
    assert host.colors == []
    w = RecordingWorld()
    w.set_background("#000000")
    g.load_world(w)
    assert host.colors == [(0.0, 0.0, 0.0, 1.0)]


def test_handle_act_and_draw_without_world_raise(green: Green, clock) -> None:  # noqa: ANN001
    clock.advance(0.2)
    with pytest.raises(NoWorldError):
        green.handle_act()
    # デルタ時間は World の有無に関わらず更新される
    assert green.delta_time == pytest.approx(0.2)
    with pytest.raises(NoWorldError):
        green.handle_draw()


def test_delta_time_is_cached_per_act(green: Green, clock) -> None:  # noqa: ANN001
    log: list = []
    world = RecordingWorld()
    world.add_object(RecordingActor("a", log))
    green.load_world(world)

    clock.advance(0.05)
    green.handle_act()
    assert green.delta_time == pytest.approx(0.05)
    clock.advance(1.0)
    # 次の act までは同じ値
    assert green.delta_time == pytest.approx(0.05)
    green.handle_act()
    assert green.delta_time == pytest.approx(1.0)
    assert [round(dt, 6) for _, dt in log] == [0.05, 1.0]
    assert [c[0] for c in world.calls] == ["world.act", "world.act"]


def test_handle_draw_delegates(green: Green) -> None:
    world = RecordingWorld()
    green.load_world(world)
    green.handle_draw()
    assert world.calls == [("world.draw",)]


def test_tick_acts_then_clears_frame_input(green: Green, clock) -> None:  # noqa: ANN001
    seen: list[bool] = []

    class KeyWatcher(RecordingWorld):
        def act(self, dt: float) -> None:
            seen.append(green.is_key_down_this_frame("x"))

    green.load_world(KeyWatcher())
    green.handle_key_down("x", 120)
    clock.advance(0.016)
    green.tick(0.016)
    green.tick(0.016)
    # act は押した瞬間を 1 フレームだけ観測する
    assert seen == [True, False]
    assert green.is_key_down("x")


def test_mouse_buttons_edges(green: Green) -> None:
    green.handle_mouse_down(MouseButton.LEFT)
    assert green.is_mouse_button_down(MouseButton.LEFT)
    assert green.is_mouse_button_down_this_frame(MouseButton.LEFT)
    assert not green.is_mouse_button_up_this_frame(MouseButton.LEFT)

    green.handle_input()
    assert green.is_mouse_button_down(MouseButton.LEFT)
    assert not green.is_mouse_button_down_this_frame(MouseButton.LEFT)

    green.handle_mouse_up(MouseButton.LEFT)
    assert not green.is_mouse_button_down(MouseButton.LEFT)
    assert green.is_mouse_button_up_this_frame(MouseButton.LEFT)


def test_mouse_position_and_speed(green: Green, clock) -> None:  # noqa: ANN001
    green.load_world(RecordingWorld())
    assert green.get_mouse_speed() == 0.0

    green.handle_mouse_position(30, 40, 0, 0)
    assert (green.mouse_x, green.mouse_y, green.pmouse_x, green.pmouse_y) == (30, 40, 0, 0)
    assert green.is_mouse_moving()
    clock.advance(0.5)
    green.handle_act()
    assert green.get_mouse_speed() == pytest.approx(100.0)

    # 次フレームでは現在位置が前回位置になる
    green.handle_input()
    assert (green.pmouse_x, green.pmouse_y) == (30, 40)
    assert not green.is_mouse_moving()


def test_mouse_speed_drops_to_zero_on_idle_frames(green: Green, clock) -> None:  # noqa: ANN001
    green.load_world(RecordingWorld())
    green.handle_mouse_position(10, 49)
    clock.advance(0.1)
    green.tick(0.1)
    for _ in range(3):
        clock.advance(0.1)
        green.tick(0.1)
    assert not green.is_mouse_moving()
    assert green.get_mouse_speed() == 0.0


def test_mouse_speed_spans_every_motion_in_frame(green: Green, clock) -> None:  # noqa: ANN001
    green.load_world(RecordingWorld())
    green.handle_input()
    green.handle_mouse_position(3, 0)
    green.handle_mouse_position(6, 8)
    clock.advance(0.5)
    green.handle_act()
    assert (green.pmouse_x, green.pmouse_y) == (0, 0)
    assert green.get_mouse_speed() == pytest.approx(20.0)


def test_mouse_wheel_resets_each_frame(green: Green) -> None:
    assert not green.is_mouse_scrolling()
    green.handle_mouse_wheel(-2)
    assert green.get_mouse_scroll() == -2
    assert green.is_mouse_scrolling()
    green.handle_input()
    assert green.get_mouse_scroll() == 0


def test_key_queries_by_char_code_and_input_key(green: Green) -> None:
    green.handle_key_down("a", 97)
    green.handle_key_down(None, 65361)
    assert green.is_key_down("a")
    assert green.is_key_down(65361)
    assert green.is_key_down(InputKey("a", 97))
    assert green.is_key_down_this_frame(97)
    assert not green.is_key_down("b")

    green.handle_input()
    green.handle_key_up(None, 65361)
    assert green.is_key_up_this_frame(65361)
    assert not green.is_key_up_this_frame("a")
    assert not green.is_key_down(65361)


def test_key_up_without_down_has_no_edge(green: Green) -> None:
    green.handle_key_up("z", 122)
    assert not green.is_key_up_this_frame("z")


def test_static_helpers_and_constants() -> None:
    assert Green.get_points_dist(0, 0, 3, 4) == pytest.approx(5.0)
    assert Green.get_digits(1234) == 4
    assert (Green.BILINEAR, Green.NEAREST_NEIGHBOR, Green.TILE) == (0, 1, 2)


def test_image_conveniences_delegate(green: Green, checker_2x2) -> None:  # noqa: ANN001
    assert green.resize_nn(checker_2x2, 4, 4).shape == (4, 4, 4)
    assert green.tile_image(checker_2x2, 3, 5).shape == (5, 3, 4)
    assert green.resize_image(checker_2x2, 4, 0, Green.NEAREST_NEIGHBOR).shape == (4, 4, 4)
