from __future__ import annotations

from plotwidget.geometry import Rect


def resolve_size(
    available: Rect,
    *,
    width: float | None = None,
    height: float | None = None,
    aspect_ratio: float | None = None,
) -> tuple[float, float]:
    """Pick the widget size; explicit width/height win over `aspect_ratio`."""
    if width is None:
        if height is not None and aspect_ratio is not None:
            width = height * aspect_ratio
        else:
            width = available.width
    if height is None:
        if aspect_ratio is not None:
            height = width / aspect_ratio
        else:
            height = available.height
    return (float(width), float(height))


def allocate(available: Rect, size: tuple[float, float]) -> Rect:
    return Rect.from_min_size(available.min, size)
