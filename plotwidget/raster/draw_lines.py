from __future__ import annotations

from typing import Sequence

import numpy as np

from plotwidget.raster.canvas import RGBA, ClipBox, draw_pixel


def draw_polyline(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    width: float = 1.0,
    clip: ClipBox | None = None,
) -> None:
    if xs.size < 2:
        return
    finite = np.isfinite(xs) & np.isfinite(ys)
    ix = np.rint(np.where(finite, xs, 0.0)).astype(np.int64)
    iy = np.rint(np.where(finite, ys, 0.0)).astype(np.int64)
    for i in range(xs.size - 1):
        # A non-finite vertex breaks the line into separate runs.
        if not (finite[i] and finite[i + 1]):
            continue
        _draw_line_segment(dst, int(ix[i]), int(iy[i]), int(ix[i + 1]), int(iy[i + 1]), color=color, width=width, clip=clip)


def draw_segment(
    dst: np.ndarray,
    points: Sequence[tuple[float, float]],
    color: RGBA,
    width: float = 1.0,
    clip: ClipBox | None = None,
) -> None:
    xs = np.asarray([p[0] for p in points], dtype=np.float64)
    ys = np.asarray([p[1] for p in points], dtype=np.float64)
    draw_polyline(dst, xs, ys, color, width=width, clip=clip)


def _draw_line_segment(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: RGBA,
    width: float,
    clip: ClipBox | None,
) -> None:
    radius = max(0, int(round(width)) // 2)
    if clip is not None:
        cx0, cy0, cx1, cy1 = clip
        if max(x0, x1) + radius < cx0 or min(x0, x1) - radius >= cx1:
            return
        if max(y0, y1) + radius < cy0 or min(y0, y1) - radius >= cy1:
            return

    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, radius=radius, clip=clip)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, radius: int, clip: ClipBox | None) -> None:
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color, clip=clip)
