from __future__ import annotations

import numpy as np

from plotwidget.geometry import Rect


RGBA = tuple[int, int, int, int]
# (x0, y0, x1, y1) in pixels, end-exclusive.
ClipBox = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def clip_box(dst: np.ndarray, rect: Rect | None = None) -> ClipBox:
    """Pixel box covered by `rect`, intersected with the canvas."""
    h, w = dst.shape[0], dst.shape[1]
    if rect is None or not rect.is_finite():
        return (0, 0, w, h)
    x0 = max(0, int(np.floor(rect.min_x)))
    y0 = max(0, int(np.floor(rect.min_y)))
    x1 = min(w, int(np.ceil(rect.max_x)))
    y1 = min(h, int(np.ceil(rect.max_y)))
    return (x0, y0, max(x0, x1), max(y0, y1))


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA, clip: ClipBox | None = None) -> None:
    x0, y0, x1, y1 = clip if clip is not None else (0, 0, dst.shape[1], dst.shape[0])
    if y < y0 or y >= y1 or x < x0 or x >= x1:
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255


def blend_mask(dst: np.ndarray, x0: int, y0: int, mask: np.ndarray, color: RGBA) -> None:
    """Alpha-blend `color` wherever the boolean `mask` placed at (x0, y0) is set.

    The caller keeps the mask inside the canvas.
    """
    h, w = mask.shape
    if h <= 0 or w <= 0 or not np.any(mask):
        return
    sub = mask
    view = dst[y0 : y0 + h, x0 : x0 + w]
    a = color[3] / 255.0
    inv = 1.0 - a
    rgb = np.asarray(color[0:3], dtype=np.float32)
    blended = (rgb * a + view[:, :, :3].astype(np.float32) * inv).astype(np.uint8)
    view[:, :, :3][sub] = blended[sub]
    view[:, :, 3][sub] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA, clip: ClipBox | None = None) -> None:
    cx0, cy0, cx1, cy1 = clip if clip is not None else (0, 0, dst.shape[1], dst.shape[0])
    if y < cy0 or y >= cy1:
        return
    xa = max(cx0, min(x0, x1))
    xb = min(cx1 - 1, max(x0, x1))
    if xa > xb:
        return
    segment = dst[y, xa : xb + 1]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, clip: ClipBox | None = None) -> None:
    cx0, cy0, cx1, cy1 = clip if clip is not None else (0, 0, dst.shape[1], dst.shape[0])
    if x < cx0 or x >= cx1:
        return
    ya = max(cy0, min(y0, y1))
    yb = min(cy1 - 1, max(y0, y1))
    if ya > yb:
        return
    segment = dst[ya : yb + 1, x]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255
