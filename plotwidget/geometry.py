from __future__ import annotations

from dataclasses import dataclass
import math
from typing import ClassVar

import numpy as np


Pos2 = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle used for both value-space bounds and screen areas.

    `Rect.NOTHING` (min = +inf, max = -inf) is the identity for `union`, so
    bounds can be accumulated without special-casing the first element.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    NOTHING: ClassVar["Rect"]

    @classmethod
    def from_min_max(cls, min_pos: Pos2, max_pos: Pos2) -> "Rect":
        return cls(float(min_pos[0]), float(min_pos[1]), float(max_pos[0]), float(max_pos[1]))

    @classmethod
    def from_min_size(cls, min_pos: Pos2, size: tuple[float, float]) -> "Rect":
        x, y = float(min_pos[0]), float(min_pos[1])
        return cls(x, y, x + float(size[0]), y + float(size[1]))

    @classmethod
    def from_points(cls, xs: np.ndarray, ys: np.ndarray) -> "Rect":
        if xs.size == 0:
            return cls.NOTHING
        # fmin/fmax skip NaN; infinities still propagate.
        return cls(
            float(np.fmin.reduce(xs, initial=math.inf)),
            float(np.fmin.reduce(ys, initial=math.inf)),
            float(np.fmax.reduce(xs, initial=-math.inf)),
            float(np.fmax.reduce(ys, initial=-math.inf)),
        )

    @property
    def left(self) -> float:
        return self.min_x

    @property
    def right(self) -> float:
        return self.max_x

    @property
    def top(self) -> float:
        return self.min_y

    @property
    def bottom(self) -> float:
        return self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def min(self) -> Pos2:
        return (self.min_x, self.min_y)

    @property
    def max(self) -> Pos2:
        return (self.max_x, self.max_y)

    def center(self) -> Pos2:
        return ((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.min_x, self.min_y, self.max_x, self.max_y))

    def contains(self, pos: Pos2) -> bool:
        x, y = pos
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def union(self, other: "Rect") -> "Rect":
        return Rect(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def intersect(self, other: "Rect") -> "Rect":
        return Rect(
            max(self.min_x, other.min_x),
            max(self.min_y, other.min_y),
            min(self.max_x, other.max_x),
            min(self.max_y, other.max_y),
        )

    def extend_with_y(self, y: float) -> "Rect":
        return Rect(self.min_x, min(self.min_y, y), self.max_x, max(self.max_y, y))

    def expand2(self, dx: float, dy: float) -> "Rect":
        return Rect(self.min_x - dx, self.min_y - dy, self.max_x + dx, self.max_y + dy)


Rect.NOTHING = Rect(math.inf, math.inf, -math.inf, -math.inf)
