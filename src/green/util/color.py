"""
どこで: `green.util.color`。
何を: 色指定の正規化（Hex, RGBA 0–1, RGBA 0–255）を一元化。
なぜ: World 背景/ウィンドウ/設定ファイルで同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

RGBA = tuple[float, float, float, float]


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）
    - 全要素が 0..1 に収まる場合は 0–1 表現とみなす（(1, 1, 1) は白）。
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[float | int] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(x) for x in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0 if all(0.0 <= x <= 1.0 for x in fseq) else 255.0)
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    # 0–255 とみなし、整数丸め → 0–1 へスケール
    r8, g8, b8, a8 = (max(0, min(255, int(round(x)))) for x in fseq)
    return (r8 / 255.0, g8 / 255.0, b8 / 255.0, a8 / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = [
    "RGBA",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
]
