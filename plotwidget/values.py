from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Sequence

import numpy as np

from plotwidget.geometry import Rect


RGBA = tuple[int, int, int, int]


def gray(level: int, alpha: int = 255) -> RGBA:
    return (level, level, level, alpha)


WHITE: RGBA = (255, 255, 255, 255)
DEFAULT_CURVE_COLOR: RGBA = gray(120)
DEFAULT_CURVE_WIDTH = 1.5


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = int(max(0.0, min(1.0, alpha)) * 255)
        return (r, g, b, a)
    r, g, b, a = color
    out_a = int(max(0.0, min(1.0, alpha)) * a)
    return (r, g, b, out_a)


@dataclass(frozen=True)
class Value:
    """A point in value space; float64 keeps it apart from screen positions."""

    x: float
    y: float

    @classmethod
    def new(cls, x: float, y: float) -> "Value":
        return cls(float(x), float(y))


@dataclass(frozen=True)
class Stroke:
    width: float
    color: RGBA


DEFAULT_CURVE_STROKE = Stroke(width=DEFAULT_CURVE_WIDTH, color=DEFAULT_CURVE_COLOR)


@dataclass(frozen=True)
class HLine:
    """A horizontal line spanning the full plot width."""

    y: float
    stroke: Stroke

    @classmethod
    def new(cls, y: float, stroke: Stroke | tuple[float, RGBA]) -> "HLine":
        if not isinstance(stroke, Stroke):
            width, color = stroke
            stroke = Stroke(width=float(width), color=color)
        return cls(y=float(y), stroke=stroke)


@dataclass(frozen=True)
class Curve:
    """An ordered series of values drawn with one stroke.

    `bounds`, `xs` and `ys` are derived once from `values` at construction;
    restyling through `stroke`/`width`/`color`/`name` returns a new curve.
    """

    values: tuple[Value, ...]
    style: Stroke = DEFAULT_CURVE_STROKE
    label: str = ""
    xs: np.ndarray = field(init=False, repr=False, compare=False)
    ys: np.ndarray = field(init=False, repr=False, compare=False)
    bounds: Rect = field(init=False, compare=False)

    def __post_init__(self) -> None:
        values = tuple(self.values)
        xs = np.fromiter((v.x for v in values), dtype=np.float64, count=len(values))
        ys = np.fromiter((v.y for v in values), dtype=np.float64, count=len(values))
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "xs", xs)
        object.__setattr__(self, "ys", ys)
        object.__setattr__(self, "bounds", Rect.from_points(xs, ys))

    @classmethod
    def from_values(cls, values: Sequence[Value]) -> "Curve":
        return cls(values=tuple(values))

    @classmethod
    def from_iter(cls, values: Iterable[Value]) -> "Curve":
        return cls(values=tuple(values))

    @classmethod
    def from_ys(cls, ys: Any) -> "Curve":
        """From a series of y values; x is the index of each value."""
        return cls.from_xy(y=ys)

    @classmethod
    def from_xy(cls, y: Any = None, *, x: Any = None, data: Any = None) -> "Curve":
        from plotwidget.adapters import normalize_xy

        xs, ys = normalize_xy(y=y, x=x, data=data)
        return cls(values=tuple(Value(float(a), float(b)) for a, b in zip(xs.tolist(), ys.tolist())))

    def __len__(self) -> int:
        return len(self.values)

    def stroke(self, stroke: Stroke | tuple[float, RGBA]) -> "Curve":
        if not isinstance(stroke, Stroke):
            width, color = stroke
            stroke = Stroke(width=float(width), color=color)
        return replace(self, style=stroke)

    def width(self, width: float) -> "Curve":
        """Stroke width in screen points."""
        return replace(self, style=Stroke(width=float(width), color=self.style.color))

    def color(self, color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> "Curve":
        return replace(self, style=Stroke(width=self.style.width, color=coerce_color(color, alpha)))

    def name(self, name: str) -> "Curve":
        return replace(self, label=str(name))
