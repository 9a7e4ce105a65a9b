"""
どこで: `green.engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とループ管理）。
なぜ: pyglet の clock から呼び出すだけで複数コンポーネントの更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        time_source: Callable[[], float] | None = None,
    ):
        self._tickables = tuple(tickables)
        for t in self._tickables:
            if not isinstance(t, Tickable):
                raise TypeError(f"{type(t).__name__} has no tick(dt) method")
        self._time_source = time_source or time.perf_counter
        self._last_time = self._time_source()
        self.frame_count = 0

    # pyglet.clock.schedule_interval から呼ばせる
    def tick(self, dt: float | None = None) -> None:
        now = self._time_source()
        if dt is None:  # pyglet は dt を渡してくれる
            dt = now - self._last_time  # 他フレームワーク用
        self._last_time = now

        for t in self._tickables:
            t.tick(dt)
        self.frame_count += 1
