from __future__ import annotations

from typing import Iterable

import numpy as np

from plotwidget.raster.canvas import RGBA, clip_box, new_canvas
from plotwidget.raster.draw_fills import draw_circle, draw_rect
from plotwidget.raster.draw_lines import draw_polyline, draw_segment
from plotwidget.raster.draw_text import TEXT_STYLE_SIZES_PX, anchored_origin, draw_text, text_size
from plotwidget.shapes import CircleFilled, ClippedShape, LineSegment, Path, RectShape, Text


def paint(dst: np.ndarray, shapes: Iterable[ClippedShape]) -> np.ndarray:
    """Rasterize clipped primitives onto `dst` in order; returns `dst`."""
    for clipped in shapes:
        clip = clip_box(dst, clipped.clip_rect)
        if clip[2] <= clip[0] or clip[3] <= clip[1]:
            continue
        shape = clipped.shape
        if isinstance(shape, LineSegment):
            draw_segment(dst, shape.points, shape.stroke.color, width=shape.stroke.width, clip=clip)
        elif isinstance(shape, Path):
            xs = np.asarray([p[0] for p in shape.points], dtype=np.float64)
            ys = np.asarray([p[1] for p in shape.points], dtype=np.float64)
            if shape.closed and xs.size > 2:
                xs = np.append(xs, xs[0])
                ys = np.append(ys, ys[0])
            draw_polyline(dst, xs, ys, shape.stroke.color, width=shape.stroke.width, clip=clip)
        elif isinstance(shape, CircleFilled):
            draw_circle(dst, shape.center[0], shape.center[1], shape.radius, shape.fill, clip=clip)
        elif isinstance(shape, RectShape):
            rect = shape.rect
            outline = shape.stroke.color if shape.stroke.width > 0 else None
            draw_rect(
                dst,
                int(np.floor(rect.min_x)),
                int(np.floor(rect.min_y)),
                int(np.ceil(rect.max_x)) - 1,
                int(np.ceil(rect.max_y)) - 1,
                fill=shape.fill,
                outline=outline,
                clip=clip,
            )
        elif isinstance(shape, Text):
            size_px = TEXT_STYLE_SIZES_PX.get(shape.style, TEXT_STYLE_SIZES_PX["body"])
            size = text_size(shape.text, font_size_px=size_px)
            x, y = anchored_origin(shape.pos[0], shape.pos[1], size, shape.anchor)
            draw_text(dst, x, y, shape.text, shape.color, font_size_px=size_px, clip=clip)
        else:
            raise TypeError(f"unsupported shape: {type(shape).__name__}")
    return dst


def paint_to_rgba(
    shapes: Iterable[ClippedShape],
    width: int,
    height: int,
    background: RGBA = (0, 0, 0, 255),
) -> np.ndarray:
    return paint(new_canvas(width, height, color=background), shapes)
