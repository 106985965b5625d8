from plotwidget.errors import PlotConfigError, PlotDataError, PlotError
from plotwidget.geometry import Pos2, Rect
from plotwidget.hover import HoverProbe, HoverResult, format_label
from plotwidget.plot import Plot, PlotConfig, PlotResponse, Widget, show_plot
from plotwidget.render import render_static
from plotwidget.scales import Transform, compute_plot_bounds, decimals_for, union_bounds
from plotwidget.shapes import CircleFilled, ClippedShape, LineSegment, Path, RectShape, Text
from plotwidget.values import Curve, HLine, Stroke, Value

__all__ = [
    "CircleFilled",
    "ClippedShape",
    "Curve",
    "HLine",
    "HoverProbe",
    "HoverResult",
    "LineSegment",
    "Path",
    "Plot",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "PlotError",
    "PlotResponse",
    "Pos2",
    "Rect",
    "RectShape",
    "Stroke",
    "Text",
    "Transform",
    "Value",
    "Widget",
    "compute_plot_bounds",
    "decimals_for",
    "format_label",
    "render_static",
    "show_plot",
    "union_bounds",
]
