"""
どこで: `green.engine.core.tickable`
何を: `FrameClock` が毎フレーム呼ぶ `tick(dt)` の型。
なぜ: `run_sketch` は `Green` だけを登録するが、自前ループから独自の更新処理
      （録画・タイマー等）を同じ FrameClock に並べられるよう、契約を `tick(dt)` 1 つに絞るため。
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Tickable(Protocol):
    """1 フレーム分の更新。`Green.tick` は dt を使わず自前の時計で act を進める。"""

    def tick(self, dt: float) -> None: ...
