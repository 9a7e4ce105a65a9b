"""
どこで: `green.util.image`。
何を: 画像（numpy 配列 `(H, W)` / `(H, W, C)`）のリサイズ（最近傍/バイリニア）とタイル敷き詰め、
      pyglet 画像との相互変換・読み込み・画面への描画を提供する。
なぜ: ドット絵を拡大してもくっきり保つ、背景画像を画面サイズへ敷き詰める、といった
      スケッチ頻出の画像処理を 1 関数呼び出しで済ませるため。

共通の寸法規則（resize_nn / resize_bilinear / tile_image）:
- `w`, `h` は `floor(abs(.))` で非負整数に丸める。
- 元画像と同寸、または両方 0 の場合は元配列をそのまま返す（コピーしない）。
- 片方だけ 0 の場合、リサイズ系は縦横比を保つよう整数除算で補う（tile_image は補わない）。

pyglet は遅延 import（ヘッドレス環境でも純粋な配列処理は使えるようにするため）。
"""

from __future__ import annotations

import logging
import math
from collections import OrderedDict
from enum import IntEnum
from pathlib import Path
from typing import Any

import numpy as np

from .color import to_u8_rgba

logger = logging.getLogger(__name__)


class ResizeMode(IntEnum):
    """`resize_image` のアルゴリズム指定。"""

    BILINEAR = 0  # 写真など精細な画像の拡大向き
    NEAREST_NEIGHBOR = 1  # ドット絵をくっきり保つ
    TILE = 2  # 拡縮せず左上から敷き詰める


BILINEAR = ResizeMode.BILINEAR
NEAREST_NEIGHBOR = ResizeMode.NEAREST_NEIGHBOR
TILE = ResizeMode.TILE

_PYGLET_FORMATS = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}


# ---- 検証/寸法 -------------------------------------------------------------
def _as_image(src: Any) -> np.ndarray:
    arr = np.asarray(src)
    if arr.ndim not in (2, 3):
        raise ValueError(f"image must be 2-D (H, W) or 3-D (H, W, C), got shape {arr.shape}")
    if arr.shape[0] <= 0 or arr.shape[1] <= 0:
        raise ValueError(f"image must not be empty, got shape {arr.shape}")
    return arr


def _sanitize_size(w: float, h: float) -> tuple[int, int]:
    return int(math.floor(abs(w))), int(math.floor(abs(h)))


def _is_noop(src: np.ndarray, w: int, h: int) -> bool:
    src_h, src_w = src.shape[:2]
    return (w == src_w and h == src_h) or (w <= 0 and h <= 0)


def _fill_proportional(w: int, h: int, src_w: int, src_h: int) -> tuple[int, int]:
    """片方だけ 0 の寸法を縦横比から補う。"""
    if w <= 0:
        w = h * src_w // src_h
    if h <= 0:
        h = w * src_h // src_w
    return w, h


def create_image(w: int, h: int, channels: int = 4, *, dtype: Any = np.uint8, fill: object = None) -> np.ndarray:
    """`(h, w, channels)` の新規画像を返す。既定は全透明（ゼロ埋め）。

    `fill` に色（Hex / RGB(A) タプル）を渡すと、uint8 RGBA へ変換して塗りつぶす。
    """
    if w < 0 or h < 0:
        raise ValueError(f"image size must be >= 0, got {(w, h)}")
    shape: tuple[int, ...] = (h, w) if channels == 0 else (h, w, channels)
    img = np.zeros(shape, dtype=dtype)
    if fill is not None:
        if channels not in (3, 4):
            raise ValueError("fill requires an RGB or RGBA image")
        img[...] = to_u8_rgba(fill)[:channels]
    return img


def _empty_like(src: np.ndarray, w: int, h: int) -> np.ndarray:
    return np.zeros((h, w) + src.shape[2:], dtype=src.dtype)


# ---- アルゴリズム ----------------------------------------------------------
def resize_nn(src: Any, w: float, h: float) -> np.ndarray:
    """最近傍補間でリサイズする。ドット絵をくっきり保ったまま拡大したい場合向け。

    出力画素 (x, y) は元画素 (floor(x / sx), floor(y / sy)) をそのまま写す
    （sx = w / src_w, sy = h / src_h）。dtype/チャンネル数は元画像を維持する。
    """
    img = _as_image(src)
    w, h = _sanitize_size(w, h)
    if _is_noop(img, w, h):
        return img
    src_h, src_w = img.shape[:2]
    w, h = _fill_proportional(w, h, src_w, src_h)
    if w == 0 or h == 0:
        return _empty_like(img, w, h)

    sx = w / src_w
    sy = h / src_h
    rows = np.floor(np.arange(h) / sy).astype(np.intp)
    cols = np.floor(np.arange(w) / sx).astype(np.intp)
    # 浮動小数の丸めで 1 画素はみ出すのを防ぐ
    np.minimum(rows, src_h - 1, out=rows)
    np.minimum(cols, src_w - 1, out=cols)
    return img[rows[:, None], cols[None, :]]


def tile_image(src: Any, w: float, h: float) -> np.ndarray:
    """元画像を左上から繰り返し敷き詰めた `(h, w)` の新規画像を返す（主に背景用）。

    右端/下端ではみ出した分は切り落とす。片方だけ 0 の場合も補完せず、その寸法は 0 になる。
    """
    img = _as_image(src)
    w, h = _sanitize_size(w, h)
    if _is_noop(img, w, h):
        return img
    src_h, src_w = img.shape[:2]

    out = create_image(w, h, img.shape[2] if img.ndim == 3 else 0, dtype=img.dtype)
    if w == 0 or h == 0:
        return out
    reps_y = -(-h // src_h)
    reps_x = -(-w // src_w)
    tiled = np.tile(img, (reps_y, reps_x) + (1,) * (img.ndim - 2))
    out[...] = tiled[:h, :w]
    return out


def _axis_weights(dst: int, src: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    # 画素中心を揃えた座標 → 左右（上下）の参照インデックスと重み
    pos = (np.arange(dst, dtype=np.float64) + 0.5) * (src / dst) - 0.5
    pos = np.clip(pos, 0.0, src - 1)
    i0 = np.floor(pos).astype(np.intp)
    i1 = np.minimum(i0 + 1, src - 1)
    return i0, i1, pos - i0


def resize_bilinear(src: Any, w: float, h: float) -> np.ndarray:
    """バイリニア補間でリサイズする。写真など精細な画像の拡大/縮小向け。"""
    img = _as_image(src)
    w, h = _sanitize_size(w, h)
    if _is_noop(img, w, h):
        return img
    src_h, src_w = img.shape[:2]
    w, h = _fill_proportional(w, h, src_w, src_h)
    if w == 0 or h == 0:
        return _empty_like(img, w, h)

    x0, x1, fx = _axis_weights(w, src_w)
    y0, y1, fy = _axis_weights(h, src_h)
    f = img.astype(np.float64)
    if f.ndim == 2:
        f = f[:, :, None]
    fx = fx[None, :, None]
    fy = fy[:, None, None]

    top = f[y0][:, x0] * (1.0 - fx) + f[y0][:, x1] * fx
    bottom = f[y1][:, x0] * (1.0 - fx) + f[y1][:, x1] * fx
    out = top * (1.0 - fy) + bottom * fy
    if img.ndim == 2:
        out = out[:, :, 0]

    if np.issubdtype(img.dtype, np.integer):
        info = np.iinfo(img.dtype)
        out = np.clip(np.rint(out), info.min, info.max)
    return out.astype(img.dtype)


def resize_image(src: Any, w: float, h: float, mode: int = BILINEAR) -> np.ndarray:
    """`mode`（BILINEAR / NEAREST_NEIGHBOR / TILE）に応じてリサイズする。"""
    try:
        resolved = ResizeMode(int(mode))
    except ValueError as e:
        raise ValueError(f"unknown resize mode: {mode!r}") from e
    if resolved is ResizeMode.NEAREST_NEIGHBOR:
        return resize_nn(src, w, h)
    if resolved is ResizeMode.TILE:
        return tile_image(src, w, h)
    return resize_bilinear(src, w, h)


# ---- pyglet 連携 -----------------------------------------------------------
def to_pyglet_image(arr: Any) -> Any:
    """uint8 画像配列を `pyglet.image.ImageData` に変換する（先頭行が画面上端）。"""
    import pyglet  # 遅延 import

    img = np.ascontiguousarray(_as_image(arr), dtype=np.uint8)
    channels = 1 if img.ndim == 2 else img.shape[2]
    fmt = _PYGLET_FORMATS.get(channels)
    if fmt is None:
        raise ValueError(f"unsupported channel count: {channels}")
    h, w = img.shape[:2]
    # 負の pitch で上→下の行順を伝える
    return pyglet.image.ImageData(w, h, fmt, img.tobytes(), pitch=-w * channels)


def load_image(path: str | Path) -> np.ndarray:
    """画像ファイルを pyglet でデコードし、`(H, W, 4)` の uint8 RGBA 配列（先頭行が上端）で返す。"""
    import pyglet  # 遅延 import

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"image not found: {p}")
    decoded = pyglet.image.load(str(p)).get_image_data()
    w, h = decoded.width, decoded.height
    raw = decoded.get_data("RGBA", w * 4)
    # pyglet は下→上の行順
    return np.frombuffer(raw, dtype=np.uint8).reshape(h, w, 4)[::-1].copy()


class _TextureCache:
    """配列 id → pyglet テクスチャの LRU（配列は生存保証のため保持する）。"""

    def __init__(self, maxsize: int = 128):
        self._maxsize = maxsize
        self._items: OrderedDict[int, tuple[np.ndarray, Any]] = OrderedDict()

    def get(self, arr: np.ndarray) -> Any:
        key = id(arr)
        hit = self._items.get(key)
        if hit is not None and hit[0] is arr:
            self._items.move_to_end(key)
            return hit[1]
        texture = to_pyglet_image(arr).get_texture()
        self._items[key] = (arr, texture)
        if len(self._items) > self._maxsize:
            self._items.popitem(last=False)
        return texture

    def invalidate(self, arr: np.ndarray) -> None:
        self._items.pop(id(arr), None)

    def clear(self) -> None:
        self._items.clear()


_textures = _TextureCache()


def invalidate_image(arr: np.ndarray) -> None:
    """配列をインプレース更新した後に呼び、次回描画でテクスチャを作り直させる。"""
    _textures.invalidate(arr)


def clear_textures() -> None:
    """キャッシュ済みテクスチャをすべて破棄する（GL コンテキストの破棄時）。"""
    _textures.clear()


def draw_image(arr: np.ndarray, x: float, y: float, canvas_height: int) -> None:
    """画像の左上を画面座標 (x, y)（左上原点・Y 下向き）に合わせて描画する。"""
    texture = _textures.get(arr)
    # pyglet は左下原点
    texture.blit(x, canvas_height - y - arr.shape[0])


__all__ = [
    "ResizeMode",
    "BILINEAR",
    "NEAREST_NEIGHBOR",
    "TILE",
    "create_image",
    "resize_nn",
    "tile_image",
    "resize_bilinear",
    "resize_image",
    "to_pyglet_image",
    "load_image",
    "invalidate_image",
    "clear_textures",
    "draw_image",
]
