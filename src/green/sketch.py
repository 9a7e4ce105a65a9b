"""
どこで: `green.sketch`（実行ランナー）。
何を: World を受け取り、`Green` ファサード・pyglet ウィンドウ・FrameClock を結線して実行する。
なぜ: スケッチ側が World/Actor を書くだけで、入力転送・act/draw 呼び出し・入力フレームの
      リセットを意識せずに済むようにするため。

実行フロー（概要）:
1) ロギング: `GREEN_LOG_LEVEL` > 設定ファイル `logging.level` > INFO で最小構成を適用。
2) FPS/キャプション/背景の解決: 引数 > 設定ファイル（`sketch.*`）> 既定。
3) `Green` を生成し World をロード（`World.prepare()` が呼ばれる）。
4) `init_only=True` ならここで `Green` を返す（pyglet を import しない）。
5) `RenderWindow` を生成し、入力転送と `green.handle_draw` を登録。
6) `FrameClock([green])` を `pyglet.clock.schedule_interval` で駆動
   （act → 入力フレームのリセット）。`ESC` でウィンドウを閉じる。
7) 終了時にスケジュール解除・シングルトン破棄を行う。

例（最小スケッチ）:
    from green import Actor, World, run

    class Ball(Actor):
        def act(self, dt):
            self.move(120 * dt)
            if self.is_at_edge():
                self.turn(3.14159)

    class Field(World):
        def prepare(self):
            self.add_object(Ball(image=my_image), 100, 100)

    run(lambda: Field(400, 300))
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

from .common import settings
from .common.logging import setup_default_logging
from .engine.core.world import World
from .green import Green
from .util.color import RGBA, normalize_color
from .util.utils import config_section

logger = logging.getLogger(__name__)

WorldSource = Union[World, Callable[[], World]]


def resolve_fps(requested_fps: int | None, *, default: int | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（<=0 は 1 に丸める）。
    - それ以外は設定ファイル `sketch.fps`、無ければ `GREEN_DEFAULT_FPS`（既定 60）。
    """
    fallback = settings.get().DEFAULT_FPS if default is None else int(default)
    if requested_fps is not None:
        return max(1, int(requested_fps))
    raw = config_section("sketch").get("fps", fallback)
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        logger.warning("invalid sketch.fps in config: %r; using %d", raw, fallback)
        return max(1, fallback)


def resolve_caption(caption: str | None) -> str:
    if caption:
        return str(caption)
    return str(config_section("sketch").get("caption") or "Green")


def resolve_background(world: World, background: object | None) -> RGBA:
    """ウィンドウ背景色: 引数 > World の背景色 > 設定ファイル > 白。"""
    if background is not None:
        return normalize_color(background)
    if world.background_color is not None:
        return world.background_color
    configured = config_section("sketch").get("background")
    if configured is not None:
        try:
            return normalize_color(configured)
        except ValueError:
            logger.warning("invalid sketch.background in config: %r", configured)
    return (1.0, 1.0, 1.0, 1.0)


def _resolve_world(source: WorldSource) -> World:
    world = source if isinstance(source, World) else source()
    if not isinstance(world, World):
        raise TypeError(f"world factory must return a World, got {type(world).__name__}")
    return world


def run_sketch(
    world: WorldSource,
    *,
    size: tuple[int, int] | None = None,
    fps: int | None = None,
    caption: str | None = None,
    background: object | None = None,
    init_only: bool = False,
) -> Green | None:
    """World を pyglet ウィンドウで実行する。

    Parameters
    ----------
    world : World | Callable[[], World]
        実行する World、または World を返す引数なし関数。
    size : tuple[int, int] | None
        ウィンドウサイズ [px]。None で World のサイズ。
    fps : int | None
        更新レート。None で設定ファイルから解決、未設定時は 60。最終的に 1 以上にクランプ。
    caption : str | None
        ウィンドウタイトル。None で設定ファイル/`"Green"`。
    background : str | tuple | None
        背景色（Hex / RGB(A)）。None で World の背景色/設定ファイル/白。
    init_only : bool, default False
        True で World のロードまで行い、ウィンドウを作らずに `Green` を返す。

    Returns
    -------
    Green | None
        `init_only=True` のときのみ生成した `Green`。通常実行ではウィンドウを閉じた後 None。
    """
    # ---- ① ロギング --------------------------------------------------
    level: Any = settings.get().LOG_LEVEL or config_section("logging").get("level", "INFO")
    setup_default_logging(level)

    # ---- ② 設定解決 --------------------------------------------------
    fps = resolve_fps(fps)
    caption = resolve_caption(caption)
    the_world = _resolve_world(world)
    if size is None:
        width, height = the_world.width, the_world.height
    else:
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            raise ValueError(f"size must be positive, got {size}")
    bg_rgba = resolve_background(the_world, background)

    # ---- ③ ファサード & World ---------------------------------------
    if init_only:
        green = Green()
        green.load_world(the_world)
        return green

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from .engine.core.frame_clock import FrameClock
    from .engine.core.render_window import RenderWindow

    # ---- ④ Window ----------------------------------------------------
    window = RenderWindow(width, height, caption=caption, bg_color=bg_rgba)
    green = Green(window)
    try:
        window.bind_input(green)
        window.add_draw_callback(green.handle_draw)
        green.load_world(the_world)
        # load_world が World の背景色を反映するため、解決済みの色（引数優先）で上書きする
        window.set_background_color(bg_rgba)

        # ---- ⑤ フレーム駆動 -------------------------------------------
        frame_clock = FrameClock([green])
        pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)
        logger.info("running %dx%d @ %d fps", width, height, fps)
        try:
            pyglet.app.run()
        finally:
            pyglet.clock.unschedule(frame_clock.tick)
            logger.info("stopped after %d frames", frame_clock.frame_count)
    finally:
        Green.reset_instance()
    return None


__all__ = ["run_sketch", "resolve_fps", "resolve_caption", "resolve_background"]
