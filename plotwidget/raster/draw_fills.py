from __future__ import annotations

import math

import numpy as np

from plotwidget.raster.canvas import RGBA, ClipBox, blend_mask, draw_hline, draw_vline


def draw_circle(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA, clip: ClipBox) -> None:
    if not (math.isfinite(cx) and math.isfinite(cy) and math.isfinite(radius)):
        return
    r = max(0.5, float(radius))
    x0 = max(clip[0], int(math.floor(cx - r)))
    y0 = max(clip[1], int(math.floor(cy - r)))
    x1 = min(clip[2], int(math.ceil(cx + r)) + 1)
    y1 = min(clip[3], int(math.ceil(cy + r)) + 1)
    if x1 <= x0 or y1 <= y0:
        return
    # Pixel centres sit at +0.5.
    yy, xx = np.mgrid[y0:y1, x0:x1]
    mask = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= r * r
    blend_mask(dst, x0, y0, mask, color)


def draw_rect(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    *,
    fill: RGBA,
    outline: RGBA | None,
    clip: ClipBox,
) -> None:
    left, right = min(x0, x1), max(x0, x1)
    top, bottom = min(y0, y1), max(y0, y1)
    fx0, fy0 = max(clip[0], left), max(clip[1], top)
    fx1, fy1 = min(clip[2], right + 1), min(clip[3], bottom + 1)
    if fx1 > fx0 and fy1 > fy0:
        blend_mask(dst, fx0, fy0, np.ones((fy1 - fy0, fx1 - fx0), dtype=bool), fill)
    if outline is None:
        return
    draw_hline(dst, left, right, top, outline, clip=clip)
    draw_hline(dst, left, right, bottom, outline, clip=clip)
    draw_vline(dst, left, top, bottom, outline, clip=clip)
    draw_vline(dst, right, top, bottom, outline, clip=clip)
