from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from plotwidget.geometry import Pos2
from plotwidget.scales import Transform, decimals_for
from plotwidget.shapes import CircleFilled, LineSegment, Shape, Text
from plotwidget.values import WHITE, Curve, Stroke, Value, gray


INTERACT_RADIUS = 16.0
MARKER_RADIUS = 3.0
CROSSHAIR_STROKE = Stroke(width=1.0, color=gray(120))


@dataclass(frozen=True)
class ClosestPoint:
    curve_index: int
    value_index: int
    value: Value
    curve_name: str
    dist_sq: float


@dataclass(frozen=True)
class HoverResult:
    value: Value
    closest: ClosestPoint | None
    label: str
    shapes: tuple[Shape, ...]


def format_label(
    value: Value,
    *,
    curve_name: str = "",
    show_x: bool = True,
    show_y: bool = True,
    x_decimals: int = 0,
    y_decimals: int = 0,
) -> str:
    lines: list[str] = []
    if curve_name:
        lines.append(curve_name)
    if show_x:
        lines.append(f"x = {value.x:.{x_decimals}f}")
    if show_y:
        lines.append(f"y = {value.y:.{y_decimals}f}")
    return "\n".join(lines)


@dataclass(frozen=True)
class HoverProbe:
    """Nearest-point lookup plus crosshair and coordinate label for one frame."""

    curves: Sequence[Curve]
    transform: Transform
    show_x: bool = True
    show_y: bool = True
    radius: float = INTERACT_RADIUS

    def find_closest(self, pointer: Pos2) -> ClosestPoint | None:
        best_sq = self.radius * self.radius
        best: ClosestPoint | None = None
        pointer_x, pointer_y = float(pointer[0]), float(pointer[1])
        for curve_index, curve in enumerate(self.curves):
            if len(curve) == 0:
                continue
            px, py = self.transform.to_screen_xy(curve.xs, curve.ys)
            dist_sq = (px - pointer_x) ** 2 + (py - pointer_y) ** 2
            # NaN compares false, so unplottable points are never candidates.
            candidates = np.flatnonzero(dist_sq < best_sq)
            if candidates.size == 0:
                continue
            # argmin returns the first minimum, matching a sequential scan.
            idx = int(candidates[np.argmin(dist_sq[candidates])])
            best_sq = float(dist_sq[idx])
            best = ClosestPoint(
                curve_index=curve_index,
                value_index=idx,
                value=curve.values[idx],
                curve_name=curve.label,
                dist_sq=best_sq,
            )
        return best

    def label_decimals(self) -> tuple[int, int]:
        dx, dy = self.transform.value_per_pixel()
        return decimals_for(dx), decimals_for(dy)

    def probe(self, pointer: Pos2) -> HoverResult | None:
        if not self.show_x and not self.show_y:
            return None

        shapes: list[Shape] = []
        closest = self.find_closest(pointer)
        if closest is not None:
            value = closest.value
            shapes.append(CircleFilled(center=self.transform.to_screen(value), radius=MARKER_RADIUS, fill=WHITE))
        else:
            value = self.transform.to_value(pointer)
        anchor_x, anchor_y = self.transform.to_screen(value)

        rect = self.transform.screen_rect
        if self.show_x:
            shapes.append(LineSegment(points=((anchor_x, rect.top), (anchor_x, rect.bottom)), stroke=CROSSHAIR_STROKE))
        if self.show_y:
            shapes.append(LineSegment(points=((rect.left, anchor_y), (rect.right, anchor_y)), stroke=CROSSHAIR_STROKE))

        x_decimals, y_decimals = self.label_decimals()
        label = format_label(
            value,
            curve_name=closest.curve_name if closest is not None else "",
            show_x=self.show_x,
            show_y=self.show_y,
            x_decimals=x_decimals,
            y_decimals=y_decimals,
        )
        shapes.append(Text(pos=(anchor_x, anchor_y), text=label, anchor="center_bottom", color=WHITE))
        return HoverResult(value=value, closest=closest, label=label, shapes=tuple(shapes))
