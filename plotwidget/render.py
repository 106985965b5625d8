from __future__ import annotations

from typing import Sequence

from plotwidget.scales import Transform
from plotwidget.shapes import CircleFilled, LineSegment, Path, Shape
from plotwidget.values import Curve, HLine, Value


def render_hline(hline: HLine, transform: Transform) -> LineSegment:
    bounds = transform.bounds
    start = transform.to_screen(Value(bounds.left, hline.y))
    end = transform.to_screen(Value(bounds.right, hline.y))
    return LineSegment(points=(start, end), stroke=hline.stroke)


def render_curve(curve: Curve, transform: Transform) -> Shape | None:
    if len(curve) == 0:
        return None
    px, py = transform.to_screen_xy(curve.xs, curve.ys)
    if len(curve) == 1:
        return CircleFilled(
            center=(float(px[0]), float(py[0])),
            radius=curve.style.width / 2.0,
            fill=curve.style.color,
        )
    points = tuple(zip(px.tolist(), py.tolist()))
    return Path(points=points, stroke=curve.style)


def render_static(curves: Sequence[Curve], hlines: Sequence[HLine], transform: Transform) -> list[Shape]:
    """Reference lines first so curves paint over them."""
    shapes: list[Shape] = [render_hline(hline, transform) for hline in hlines]
    for curve in curves:
        shape = render_curve(curve, transform)
        if shape is not None:
            shapes.append(shape)
    return shapes
