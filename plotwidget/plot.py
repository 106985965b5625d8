from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Protocol

from plotwidget.errors import PlotConfigError
from plotwidget.geometry import Pos2, Rect
from plotwidget.hover import HoverProbe, HoverResult
from plotwidget.layout import allocate, resolve_size
from plotwidget.render import render_static
from plotwidget.scales import Transform, compute_plot_bounds
from plotwidget.shapes import ClippedShape, RectShape, Shape, clip_all
from plotwidget.values import Curve, HLine, Stroke, gray


LOGGER = logging.getLogger(__name__)

DEFAULT_MARGIN = (4.0, 4.0)
BACKGROUND_FILL = gray(10)
BACKGROUND_STROKE = Stroke(width=1.0, color=gray(120))
BACKGROUND_CORNER_RADIUS = 2.0


@dataclass(frozen=True)
class PlotResponse:
    rect: Rect
    shapes: list[ClippedShape]
    hovered: bool
    bounds: Rect | None = None
    transform: Transform | None = None
    hover: HoverResult | None = None

    @property
    def interacted(self) -> bool:
        return self.hover is not None


class Widget(Protocol):
    def show(self, available: Rect, pointer: Pos2 | None = None, *, hovered: bool | None = None) -> PlotResponse:
        ...


@dataclass(frozen=True)
class PlotConfig:
    curves: tuple[Curve, ...] = ()
    hlines: tuple[HLine, ...] = ()
    bounds: Rect = Rect.NOTHING
    symmetrical_x_bounds: bool = False
    symmetrical_y_bounds: bool = False
    margin: tuple[float, float] = DEFAULT_MARGIN
    width: float | None = None
    height: float | None = None
    aspect_ratio: float | None = None
    show_x: bool = True
    show_y: bool = True

    def validate(self) -> "PlotConfig":
        for name in ("width", "height", "aspect_ratio"):
            value = getattr(self, name)
            if value is not None and not (math.isfinite(value) and value > 0):
                raise PlotConfigError(f"{name} must be > 0")
        if len(self.margin) != 2 or not all(math.isfinite(m) and m >= 0 for m in self.margin):
            raise PlotConfigError("margin must be two finite values >= 0")
        for curve in self.curves:
            if curve.style.width < 0:
                raise PlotConfigError(f"curve {curve.label!r} has negative stroke width")
        for hline in self.hlines:
            if hline.stroke.width < 0:
                raise PlotConfigError("hline stroke width must be >= 0")
        return self


@dataclass
class Plot:
    """Builder for a 2D plot of curves and horizontal reference lines.

    All setters return the builder so options can be chained; `show` consumes
    it and recomputes bounds, transform and primitives from scratch.
    """

    _curves: list[Curve] = field(default_factory=list)
    _hlines: list[HLine] = field(default_factory=list)
    _bounds: Rect = Rect.NOTHING
    _symmetrical_x_bounds: bool = False
    _symmetrical_y_bounds: bool = False
    _margin: tuple[float, float] = DEFAULT_MARGIN
    _width: float | None = None
    _height: float | None = None
    _aspect_ratio: float | None = None
    _show_x: bool = True
    _show_y: bool = True
    _consumed: bool = False

    def curve(self, curve: Curve) -> "Plot":
        self._bounds = self._bounds.union(curve.bounds)
        self._curves.append(curve)
        return self

    def hline(self, hline: HLine) -> "Plot":
        self.include_y(hline.y)
        self._hlines.append(hline)
        return self

    def include_y(self, y: float) -> "Plot":
        """Expand bounds to include the given y value."""
        self._bounds = self._bounds.extend_with_y(float(y))
        return self

    def symmetrical_x_bounds(self, symmetrical: bool) -> "Plot":
        """Keep the x=0 line in the horizontal centre."""
        self._symmetrical_x_bounds = bool(symmetrical)
        return self

    def symmetrical_y_bounds(self, symmetrical: bool) -> "Plot":
        """Keep the y=0 line in the vertical centre."""
        self._symmetrical_y_bounds = bool(symmetrical)
        return self

    def margin(self, x: float, y: float | None = None) -> "Plot":
        self._margin = (float(x), float(x if y is None else y))
        return self

    def width(self, width: float) -> "Plot":
        self._width = float(width)
        return self

    def height(self, height: float) -> "Plot":
        self._height = float(height)
        return self

    def aspect_ratio(self, aspect_ratio: float) -> "Plot":
        """width / height ratio."""
        self._aspect_ratio = float(aspect_ratio)
        return self

    def show_x(self, show: bool) -> "Plot":
        self._show_x = bool(show)
        return self

    def show_y(self, show: bool) -> "Plot":
        self._show_y = bool(show)
        return self

    def config(self) -> PlotConfig:
        return PlotConfig(
            curves=tuple(self._curves),
            hlines=tuple(self._hlines),
            bounds=self._bounds,
            symmetrical_x_bounds=self._symmetrical_x_bounds,
            symmetrical_y_bounds=self._symmetrical_y_bounds,
            margin=self._margin,
            width=self._width,
            height=self._height,
            aspect_ratio=self._aspect_ratio,
            show_x=self._show_x,
            show_y=self._show_y,
        ).validate()

    def show(self, available: Rect, pointer: Pos2 | None = None, *, hovered: bool | None = None) -> PlotResponse:
        if self._consumed:
            LOGGER.debug("plot builder shown twice")
            raise PlotConfigError("plot has already been shown; build a new Plot for each frame")
        config = self.config()
        self._consumed = True
        return show_plot(config, available, pointer, hovered=hovered)


def show_plot(
    config: PlotConfig,
    available: Rect,
    pointer: Pos2 | None = None,
    *,
    hovered: bool | None = None,
) -> PlotResponse:
    size = resolve_size(
        available,
        width=config.width,
        height=config.height,
        aspect_ratio=config.aspect_ratio,
    )
    rect = allocate(available, size)
    if hovered is None:
        hovered = pointer is not None and rect.contains(pointer)

    background = RectShape(
        rect=rect,
        corner_radius=BACKGROUND_CORNER_RADIUS,
        fill=BACKGROUND_FILL,
        stroke=BACKGROUND_STROKE,
    )
    shapes: list[Shape] = [background]

    bounds = compute_plot_bounds(
        config.bounds,
        rect,
        symmetrical_x=config.symmetrical_x_bounds,
        symmetrical_y=config.symmetrical_y_bounds,
        margin=config.margin,
    )
    if not bounds.is_finite():
        LOGGER.debug("plot bounds are not finite (%s); drawing background only", bounds)
        return PlotResponse(rect=rect, shapes=clip_all(rect, shapes), hovered=hovered)

    transform = Transform(source=bounds, dest=rect)
    shapes.extend(render_static(config.curves, config.hlines, transform))

    hover: HoverResult | None = None
    if hovered and pointer is not None:
        probe = HoverProbe(curves=config.curves, transform=transform, show_x=config.show_x, show_y=config.show_y)
        hover = probe.probe(pointer)
        if hover is not None:
            shapes.extend(hover.shapes)

    return PlotResponse(
        rect=rect,
        shapes=clip_all(rect, shapes),
        hovered=hovered,
        bounds=bounds,
        transform=transform,
        hover=hover,
    )
