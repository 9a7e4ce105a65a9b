"""共通フィクスチャ。

- `Green` シングルトンの後始末
- 手動で進める時計
- 小さな画像試料
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from green import Green
from tests._utils.clock import ManualClock


@pytest.fixture(autouse=True)
def reset_green_singleton() -> Iterator[None]:
    """各テストの前後で `Green` のシングルトンと現在の World を破棄する。"""
    Green.reset_instance()
    yield
    Green.reset_instance()


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(start=10.0)


@pytest.fixture()
def green(clock: ManualClock) -> Green:
    return Green(time_source=clock)


@pytest.fixture()
def checker_2x2() -> np.ndarray:
    """2x2 RGBA の市松模様（左上=赤, 右上=緑, 左下=青, 右下=白）。"""
    img = np.zeros((2, 2, 4), dtype=np.uint8)
    img[0, 0] = (255, 0, 0, 255)
    img[0, 1] = (0, 255, 0, 255)
    img[1, 0] = (0, 0, 255, 255)
    img[1, 1] = (255, 255, 255, 255)
    return img


@pytest.fixture()
def gray_3x2() -> np.ndarray:
    """幅 3・高さ 2 のグレースケール（画素値 = 行*10 + 列）。"""
    return np.array([[0, 1, 2], [10, 11, 12]], dtype=np.uint8)
