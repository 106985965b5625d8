from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

import numpy as np

from plotwidget.geometry import Pos2, Rect
from plotwidget.values import Curve, Value


DEGENERATE_HALF_SPAN = 1.0
MAX_LABEL_DECIMALS = 6


def union_bounds(curves: Iterable[Curve], include_y: Iterable[float] = ()) -> Rect:
    bounds = Rect.NOTHING
    for curve in curves:
        bounds = bounds.union(curve.bounds)
    for y in include_y:
        bounds = bounds.extend_with_y(float(y))
    return bounds


def symmetrize(bounds: Rect, *, x: bool = False, y: bool = False) -> Rect:
    min_x, min_y, max_x, max_y = bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y
    if x:
        x_abs = max(abs(min_x), abs(max_x))
        min_x, max_x = -x_abs, x_abs
    if y:
        y_abs = max(abs(min_y), abs(max_y))
        min_y, max_y = -y_abs, y_abs
    return Rect(min_x, min_y, max_x, max_y)


def widen_degenerate(bounds: Rect, half_span: float = DEGENERATE_HALF_SPAN) -> Rect:
    min_x, min_y, max_x, max_y = bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y
    if math.isfinite(min_x) and min_x == max_x:
        min_x -= half_span
        max_x += half_span
    if math.isfinite(min_y) and min_y == max_y:
        min_y -= half_span
        max_y += half_span
    return Rect(min_x, min_y, max_x, max_y)


def margin_in_values(bounds: Rect, screen: Rect, margin: tuple[float, float]) -> tuple[float, float]:
    """Convert a screen-space margin into value units for the final transform."""
    mx = margin[0] * bounds.width / screen.width if screen.width > 0 else math.inf
    my = margin[1] * bounds.height / screen.height if screen.height > 0 else math.inf
    return (mx, my)


def compute_plot_bounds(
    bounds: Rect,
    screen: Rect,
    *,
    symmetrical_x: bool = False,
    symmetrical_y: bool = False,
    margin: tuple[float, float] = (4.0, 4.0),
) -> Rect:
    bounds = symmetrize(bounds, x=symmetrical_x, y=symmetrical_y)
    bounds = widen_degenerate(bounds)
    mx, my = margin_in_values(bounds, screen, margin)
    return bounds.expand2(mx, my)


@dataclass(frozen=True)
class Transform:
    """Affine mapping between a value-space rect and a screen-space rect.

    The y axis is flipped: `source.max_y` lands on `dest.top`, so values that
    grow upward are drawn upward on a top-left-origin screen.
    """

    source: Rect
    dest: Rect

    @property
    def bounds(self) -> Rect:
        return self.source

    @property
    def screen_rect(self) -> Rect:
        return self.dest

    def _scale(self) -> tuple[float, float]:
        sx = self.dest.width / self.source.width if self.source.width != 0 else 0.0
        sy = self.dest.height / self.source.height if self.source.height != 0 else 0.0
        return sx, sy

    def to_screen(self, value: Value) -> Pos2:
        px, py = self.to_screen_xy(
            np.asarray([value.x], dtype=np.float64),
            np.asarray([value.y], dtype=np.float64),
        )
        return (float(px[0]), float(py[0]))

    def to_screen_xy(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        sx, sy = self._scale()
        cx, cy = self.dest.center()
        if sx == 0.0:
            px = np.full(xs.shape, cx, dtype=np.float64)
        else:
            px = self.dest.min_x + (xs - self.source.min_x) * sx
        if sy == 0.0:
            py = np.full(ys.shape, cy, dtype=np.float64)
        else:
            py = self.dest.max_y - (ys - self.source.min_y) * sy
        return px, py

    def to_value(self, pos: Pos2) -> Value:
        sx, sy = self._scale()
        x, y = float(pos[0]), float(pos[1])
        vx = self.source.min_x + (x - self.dest.min_x) / sx if sx != 0.0 else self.source.min_x
        vy = self.source.min_y + (self.dest.max_y - y) / sy if sy != 0.0 else self.source.min_y
        return Value(vx, vy)

    def value_per_pixel(self) -> tuple[float, float]:
        dx = self.source.width / self.dest.width if self.dest.width != 0 else math.inf
        dy = self.source.height / self.dest.height if self.dest.height != 0 else math.inf
        return dx, dy


def decimals_for(value_per_pixel: float) -> int:
    """Decimal places needed to resolve one screen pixel, clamped to [0, 6]."""
    if math.isnan(value_per_pixel):
        return 0
    if value_per_pixel <= 0:
        return MAX_LABEL_DECIMALS
    decimals = math.ceil(-math.log10(value_per_pixel)) if math.isfinite(value_per_pixel) else 0
    return max(0, min(MAX_LABEL_DECIMALS, decimals))
