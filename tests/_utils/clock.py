"""テスト用の手動クロック（`time_source` に差し込む）。"""

from __future__ import annotations


class ManualClock:
    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += float(seconds)
