"""
どこで: `green.util.mathutils`。
何を: 2 点間の距離/角度、線分交差判定、逆三角関数（csc/sec/cot）、桁数などの小ヘルパ。
なぜ: スケッチ側で頻出する計算を 1 か所にまとめ、Actor/World からも再利用するため。

角度はすべてラジアン。座標系は左上原点・Y 下向き（画面座標）を想定するが、
各関数自体は座標系に依存しない。
"""

from __future__ import annotations

import math


def get_points_dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """点 (x1, y1) と (x2, y2) の距離を返す。"""
    return math.hypot(x2 - x1, y2 - y1)


def get_points_angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """点 (x1, y1) から (x2, y2) へ向かう角度 [rad] を返す。

    同一点の場合は向きが定まらないため 0.0 を返す。
    """
    if x1 == x2 and y1 == y2:
        return 0.0
    return math.atan2(y2 - y1, x2 - x1)


def _slope_intercept(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float]:
    m = (y2 - y1) / (x2 - x1)
    return m, y1 - m * x1


def get_lines_intersect(
    a1x: float,
    a1y: float,
    a2x: float,
    a2y: float,
    b1x: float,
    b1y: float,
    b2x: float,
    b2y: float,
) -> bool:
    """線分 A[(a1x,a1y)-(a2x,a2y)] と線分 B[(b1x,b1y)-(b2x,b2y)] が交差するかを返す。

    - 傾き/切片から直線の交点を求め、その交点が両線分のバウンディングボックス内（境界含む）
      にあるかで判定する。
    - 片方が垂直（x 一定）の場合は交点 x をその x に固定する。
    - 両方が垂直、または傾きが等しい（平行/同一直線）場合は交差しないとみなす。
    """
    a_vertical = a1x == a2x
    b_vertical = b1x == b2x
    if a_vertical and b_vertical:
        return False

    if a_vertical:
        b_m, b_b = _slope_intercept(b1x, b1y, b2x, b2y)
        ix = a1x
        iy = b_m * ix + b_b
    elif b_vertical:
        a_m, a_b = _slope_intercept(a1x, a1y, a2x, a2y)
        ix = b1x
        iy = a_m * ix + a_b
    else:
        a_m, a_b = _slope_intercept(a1x, a1y, a2x, a2y)
        b_m, b_b = _slope_intercept(b1x, b1y, b2x, b2y)
        if a_m == b_m:
            return False
        ix = (b_b - a_b) / (a_m - b_m)
        iy = a_m * ix + a_b

    return (
        min(a1x, a2x) <= ix <= max(a1x, a2x)
        and min(b1x, b2x) <= ix <= max(b1x, b2x)
        and min(a1y, a2y) <= iy <= max(a1y, a2y)
        and min(b1y, b2y) <= iy <= max(b1y, b2y)
    )


def _reciprocal(value: float) -> float:
    # 分母 0 は例外ではなく符号付き無限大
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def csc(angle: float) -> float:
    """余割 1/sin(angle)。"""
    return _reciprocal(math.sin(angle))


def sec(angle: float) -> float:
    """正割 1/cos(angle)。"""
    return _reciprocal(math.cos(angle))


def cot(angle: float) -> float:
    """余接 1/tan(angle)。"""
    return _reciprocal(math.tan(angle))


def get_digits(value: int) -> int:
    """整数の 10 進表記の文字数を返す（負数は符号も 1 文字に数える）。"""
    return len(str(int(value)))


__all__ = [
    "get_points_dist",
    "get_points_angle",
    "get_lines_intersect",
    "csc",
    "sec",
    "cot",
    "get_digits",
]
