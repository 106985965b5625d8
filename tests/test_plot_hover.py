from __future__ import annotations

import math
import unittest

from plotwidget import CircleFilled, Curve, LineSegment, Plot, Rect, Text, Transform, Value, decimals_for, format_label
from plotwidget.hover import INTERACT_RADIUS, HoverProbe
from plotwidget.plot import show_plot


def _identity_transform() -> Transform:
    # Screen position of value (x, y) is (x, 100 - y).
    return Transform(source=Rect(0.0, 0.0, 100.0, 100.0), dest=Rect(0.0, 0.0, 100.0, 100.0))


def _screen_curve(points: list[tuple[float, float]], name: str = "") -> Curve:
    return Curve.from_values([Value(x, 100.0 - y) for x, y in points]).name(name)


class HoverProbeTests(unittest.TestCase):
    def test_selects_nearest_point_within_radius(self) -> None:
        curve = _screen_curve([(10.0, 10.0), (20.0, 10.0), (40.0, 10.0)])
        probe = HoverProbe(curves=[curve], transform=_identity_transform())
        closest = probe.find_closest((12.0, 10.0))
        assert closest is not None
        self.assertEqual(closest.value_index, 0)
        self.assertAlmostEqual(closest.dist_sq, 4.0)

    def test_first_point_wins_ties(self) -> None:
        curve = _screen_curve([(10.0, 10.0), (20.0, 10.0), (40.0, 10.0)])
        probe = HoverProbe(curves=[curve], transform=_identity_transform())
        closest = probe.find_closest((30.0, 10.0))
        assert closest is not None
        self.assertEqual(closest.value_index, 1)

    def test_no_point_when_all_outside_radius(self) -> None:
        curve = _screen_curve([(10.0, 10.0), (90.0, 90.0)])
        probe = HoverProbe(curves=[curve], transform=_identity_transform())
        self.assertIsNone(probe.find_closest((50.0, 50.0)))

    def test_radius_is_exclusive(self) -> None:
        curve = _screen_curve([(10.0, 10.0)])
        probe = HoverProbe(curves=[curve], transform=_identity_transform())
        self.assertIsNone(probe.find_closest((10.0 + INTERACT_RADIUS, 10.0)))
        self.assertIsNotNone(probe.find_closest((10.0 + INTERACT_RADIUS - 0.01, 10.0)))

    def test_later_curve_wins_only_when_strictly_closer(self) -> None:
        first = _screen_curve([(10.0, 10.0)], name="first")
        second = _screen_curve([(14.0, 10.0)], name="second")
        probe = HoverProbe(curves=[first, second], transform=_identity_transform())
        closest_tie = probe.find_closest((12.0, 10.0))
        assert closest_tie is not None
        self.assertEqual(closest_tie.curve_name, "first")
        closest = probe.find_closest((13.0, 10.0))
        assert closest is not None
        self.assertEqual(closest.curve_index, 1)
        self.assertEqual(closest.curve_name, "second")

    def test_nan_points_are_never_selected(self) -> None:
        curve = Curve.from_values([Value(math.nan, 50.0), Value(50.0, math.nan)])
        probe = HoverProbe(curves=[curve], transform=_identity_transform())
        self.assertIsNone(probe.find_closest((50.0, 50.0)))

    def test_probe_without_x_or_y_produces_nothing(self) -> None:
        curve = _screen_curve([(10.0, 10.0)])
        probe = HoverProbe(curves=[curve], transform=_identity_transform(), show_x=False, show_y=False)
        self.assertIsNone(probe.probe((10.0, 10.0)))

    def test_probe_marks_hit_point_and_draws_crosshair(self) -> None:
        curve = _screen_curve([(20.0, 30.0)], name="dot")
        result = HoverProbe(curves=[curve], transform=_identity_transform()).probe((22.0, 31.0))
        assert result is not None
        self.assertEqual(result.value, Value(20.0, 70.0))
        marker, vline, hline, text = result.shapes
        self.assertEqual(marker, CircleFilled(center=(20.0, 30.0), radius=3.0, fill=(255, 255, 255, 255)))
        assert isinstance(vline, LineSegment) and isinstance(hline, LineSegment)
        self.assertEqual(vline.points, ((20.0, 0.0), (20.0, 100.0)))
        self.assertEqual(hline.points, ((0.0, 30.0), (100.0, 30.0)))
        assert isinstance(text, Text)
        self.assertEqual(text.pos, (20.0, 30.0))
        self.assertEqual(text.anchor, "center_bottom")
        self.assertEqual(text.text, "dot\nx = 20\ny = 70")


class HoverLabelTests(unittest.TestCase):
    def test_format_label_variants(self) -> None:
        value = Value(1.23456, 2.5)
        self.assertEqual(format_label(value, curve_name="sin", x_decimals=2, y_decimals=1), "sin\nx = 1.23\ny = 2.5")
        self.assertEqual(format_label(value, show_y=False, x_decimals=3), "x = 1.235")
        self.assertEqual(format_label(value, show_x=False, y_decimals=0), "y = 2")

    def test_decimals_from_value_per_pixel(self) -> None:
        self.assertEqual(decimals_for(1.0), 0)
        self.assertEqual(decimals_for(0.1), 1)
        self.assertEqual(decimals_for(0.015), 2)
        self.assertEqual(decimals_for(250.0), 0)
        self.assertEqual(decimals_for(1e-9), 6)
        self.assertEqual(decimals_for(0.0), 6)
        self.assertEqual(decimals_for(math.nan), 0)

    def test_zooming_in_never_reduces_precision(self) -> None:
        d = 1000.0
        previous = decimals_for(d)
        for _ in range(60):
            d /= 2.0
            current = decimals_for(d)
            self.assertGreaterEqual(current, previous)
            self.assertGreaterEqual(current, 0)
            self.assertLessEqual(current, 6)
            previous = current


class PlotHoverTests(unittest.TestCase):
    def test_pointer_on_single_point_curve_selects_it(self) -> None:
        line = Curve.from_values([Value(0, 0), Value(1, 1), Value(2, 2)]).name("line")
        dot = Curve.from_values([Value(1, 0.9)]).name("dot")
        config = Plot().curve(line).curve(dot).config()
        screen = Rect(0.0, 0.0, 100.0, 100.0)

        first = show_plot(config, screen)
        assert first.transform is not None
        pointer = first.transform.to_screen(Value(1.0, 0.9))
        # The line's middle point is also inside the interaction radius.
        line_mid = first.transform.to_screen(Value(1.0, 1.0))
        self.assertLess(math.dist(pointer, line_mid), INTERACT_RADIUS)

        response = show_plot(config, screen, pointer)
        assert response.hover is not None and response.hover.closest is not None
        self.assertEqual(response.hover.closest.curve_name, "dot")
        self.assertEqual(response.hover.closest.dist_sq, 0.0)
        self.assertEqual(response.hover.value, Value(1.0, 0.9))
        self.assertTrue(response.hover.label.startswith("dot\n"))
        self.assertTrue(response.interacted)

    def test_pointer_far_from_points_falls_back_to_pointer_value(self) -> None:
        plot = Plot().curve(Curve.from_values([Value(0, 0), Value(10, 10)]).name("diag")).margin(0.0)
        response = plot.show(Rect(0.0, 0.0, 100.0, 100.0), (50.0, 50.0))
        assert response.hover is not None
        self.assertIsNone(response.hover.closest)
        self.assertEqual(response.hover.value, Value(5.0, 5.0))
        self.assertEqual(response.hover.label, "x = 5.0\ny = 5.0")
        self.assertFalse(any(isinstance(c.shape, CircleFilled) for c in response.shapes))

    def test_show_x_only_draws_vertical_crosshair(self) -> None:
        plot = Plot().curve(Curve.from_values([Value(0, 0), Value(10, 10)])).margin(0.0).show_y(False)
        response = plot.show(Rect(0.0, 0.0, 100.0, 100.0), (50.0, 50.0))
        assert response.hover is not None
        segments = [s for s in response.hover.shapes if isinstance(s, LineSegment)]
        self.assertEqual(len(segments), 1)
        self.assertEqual(segments[0].points, ((50.0, 0.0), (50.0, 100.0)))
        self.assertEqual(response.hover.label, "x = 5.0")

    def test_hidden_x_and_y_skip_overlay(self) -> None:
        plot = Plot().curve(Curve.from_values([Value(0, 0), Value(10, 10)])).show_x(False).show_y(False)
        response = plot.show(Rect(0.0, 0.0, 100.0, 100.0), (50.0, 50.0))
        self.assertTrue(response.hovered)
        self.assertIsNone(response.hover)
        self.assertEqual(len(response.shapes), 2)

    def test_not_hovered_means_no_overlay(self) -> None:
        plot = Plot().curve(Curve.from_values([Value(0, 0), Value(10, 10)]))
        response = plot.show(Rect(0.0, 0.0, 100.0, 100.0), (50.0, 50.0), hovered=False)
        self.assertFalse(response.hovered)
        self.assertIsNone(response.hover)


if __name__ == "__main__":
    unittest.main()
