from __future__ import annotations

import math
import os

import numpy as np

from plotwidget import Curve, Plot, Rect, Value
from plotwidget.compile import compile_full_rewrite_batch
from plotwidget.raster import paint_to_rgba


TAU = 2.0 * math.pi


def circle_curve(n: int = 500, r: float = 0.5) -> Curve:
    t = np.linspace(0.0, TAU, n + 1)
    values = (Value(r * math.cos(ti), r * math.sin(ti)) for ti in t.tolist())
    return Curve.from_iter(values).color((100, 240, 100)).name("circle")


def lissajous_curve(time: float, n: int = 5_000) -> Curve:
    t = np.linspace(0.0, TAU, n + 1)
    return (
        Curve.from_xy(x=np.sin(4.0 * t + time), y=np.sin(6.0 * t))
        .color((100, 150, 250))
        .name("x=sin(4t), y=sin(6t)")
    )


class PlotDemoApp:
    def __init__(self) -> None:
        self.animate = os.getenv("PLOTWIDGET_DEMO_ANIMATE", "1") != "0"
        # Host sets this from its pointer events; None when the pointer is away.
        self.pointer: tuple[float, float] | None = None
        self._time = 0.0
        self.last_response = None

    def init(self, ctx) -> None:
        self._time = 0.0
        self._render(ctx)

    def loop(self, ctx, dt: float) -> None:
        if self.animate:
            self._time += max(0.0, dt)
        self._render(ctx)

    def stop(self, ctx) -> None:
        return None

    def _render(self, ctx) -> None:
        snap = ctx.read_matrix_snapshot()
        h, w, _ = snap.shape
        time = self._time if self.animate else 0.0
        plot = Plot().curve(circle_curve()).curve(lissajous_curve(time)).aspect_ratio(1.0)
        response = plot.show(Rect(0.0, 0.0, float(w), float(h)), self.pointer)
        self.last_response = response
        frame = paint_to_rgba(response.shapes, w, h)
        ctx.submit_write_batch(compile_full_rewrite_batch(frame))


def create() -> PlotDemoApp:
    return PlotDemoApp()
