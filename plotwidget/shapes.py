from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from plotwidget.geometry import Pos2, Rect
from plotwidget.values import RGBA, Stroke


Anchor = Literal["left_top", "center_top", "center_center", "center_bottom", "left_bottom"]
TextStyle = Literal["body", "small"]


@dataclass(frozen=True)
class LineSegment:
    points: tuple[Pos2, Pos2]
    stroke: Stroke


@dataclass(frozen=True)
class CircleFilled:
    center: Pos2
    radius: float
    fill: RGBA


@dataclass(frozen=True)
class Path:
    """Open polyline through `points` in order."""

    points: tuple[Pos2, ...]
    stroke: Stroke
    closed: bool = False


@dataclass(frozen=True)
class RectShape:
    rect: Rect
    corner_radius: float
    fill: RGBA
    stroke: Stroke


@dataclass(frozen=True)
class Text:
    pos: Pos2
    text: str
    anchor: Anchor
    color: RGBA
    style: TextStyle = "body"


Shape: TypeAlias = LineSegment | CircleFilled | Path | RectShape | Text


@dataclass(frozen=True)
class ClippedShape:
    """A primitive plus the screen region it must not paint outside of."""

    clip_rect: Rect
    shape: Shape


def clip_all(clip_rect: Rect, shapes: list[Shape]) -> list[ClippedShape]:
    return [ClippedShape(clip_rect=clip_rect, shape=shape) for shape in shapes]
