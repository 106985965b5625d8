from __future__ import annotations

import unittest

from plotwidget import Curve, HLine, Plot, Rect, Stroke, Value
from plotwidget.scales import compute_plot_bounds, margin_in_values, symmetrize, union_bounds, widen_degenerate


GRAY = Stroke(1.0, (120, 120, 120, 255))


class PlotBoundsTests(unittest.TestCase):
    def test_union_covers_all_curves(self) -> None:
        a = Curve.from_values([Value(0, 0), Value(1, 1)])
        b = Curve.from_values([Value(-2, 0.5), Value(0.5, 3)])
        self.assertEqual(union_bounds([a, b]), Rect(-2.0, 0.0, 1.0, 3.0))

    def test_no_curves_gives_nothing(self) -> None:
        self.assertEqual(union_bounds([]), Rect.NOTHING)

    def test_included_y_extends_only_y_range(self) -> None:
        curve = Curve.from_values([Value(-1, -1), Value(1, 1)])
        bounds = union_bounds([curve], include_y=[2.0, -5.0])
        self.assertEqual(bounds, Rect(-1.0, -5.0, 1.0, 2.0))

    def test_hline_is_included_before_margin(self) -> None:
        plot = Plot().curve(Curve.from_values([Value(-1, -1), Value(1, 1)])).hline(HLine(2.0, GRAY))
        config = plot.symmetrical_x_bounds(False).config()
        self.assertGreaterEqual(config.bounds.max_y, 2.0)
        self.assertEqual(config.bounds.min_x, -1.0)

    def test_hline_only_bounds_stay_non_finite(self) -> None:
        config = Plot().hline(HLine(2.0, GRAY)).config()
        self.assertEqual(config.bounds.min_y, 2.0)
        self.assertEqual(config.bounds.max_y, 2.0)
        self.assertFalse(config.bounds.is_finite())

    def test_symmetrical_x_bounds(self) -> None:
        bounds = symmetrize(Rect(-1.0, 0.0, 3.0, 2.0), x=True)
        self.assertEqual(bounds.max_x, -bounds.min_x)
        self.assertEqual(bounds.max_x, 3.0)
        self.assertEqual((bounds.min_y, bounds.max_y), (0.0, 2.0))

    def test_symmetrical_y_bounds_is_independent(self) -> None:
        bounds = symmetrize(Rect(-1.0, -4.0, 3.0, 2.0), y=True)
        self.assertEqual((bounds.min_x, bounds.max_x), (-1.0, 3.0))
        self.assertEqual((bounds.min_y, bounds.max_y), (-4.0, 4.0))

    def test_symmetry_survives_margin_expansion(self) -> None:
        screen = Rect(0.0, 0.0, 200.0, 100.0)
        bounds = compute_plot_bounds(
            Rect(0.5, 1.0, 2.0, 3.0),
            screen,
            symmetrical_x=True,
            symmetrical_y=True,
        )
        self.assertAlmostEqual(bounds.max_x, -bounds.min_x, places=12)
        self.assertAlmostEqual(bounds.max_y, -bounds.min_y, places=12)

    def test_margin_is_converted_to_value_units_per_axis(self) -> None:
        raw = Rect(0.0, 0.0, 10.0, 5.0)
        screen = Rect(0.0, 0.0, 100.0, 50.0)
        mx, my = margin_in_values(raw, screen, (4.0, 4.0))
        self.assertAlmostEqual(mx, 0.4)
        self.assertAlmostEqual(my, 0.4)

        final = compute_plot_bounds(raw, screen, margin=(4.0, 4.0))
        self.assertAlmostEqual(final.width - raw.width, 2 * mx)
        self.assertAlmostEqual(final.height - raw.height, 2 * my)

    def test_margin_uses_independent_axis_scales(self) -> None:
        raw = Rect(0.0, 0.0, 1000.0, 1.0)
        screen = Rect(0.0, 0.0, 100.0, 100.0)
        final = compute_plot_bounds(raw, screen, margin=(4.0, 2.0))
        self.assertAlmostEqual(final.min_x, -40.0)
        self.assertAlmostEqual(final.min_y, -0.02)

    def test_zero_margin_keeps_raw_bounds(self) -> None:
        raw = Rect(-1.0, -2.0, 3.0, 4.0)
        self.assertEqual(compute_plot_bounds(raw, Rect(0, 0, 100, 100), margin=(0.0, 0.0)), raw)

    def test_degenerate_axes_are_widened(self) -> None:
        self.assertEqual(widen_degenerate(Rect(0.0, 0.0, 0.0, 0.0)), Rect(-1.0, -1.0, 1.0, 1.0))
        self.assertEqual(widen_degenerate(Rect(0.0, 2.0, 5.0, 2.0)), Rect(0.0, 1.0, 5.0, 3.0))
        self.assertEqual(widen_degenerate(Rect.NOTHING), Rect.NOTHING)

    def test_empty_screen_makes_bounds_non_finite(self) -> None:
        bounds = compute_plot_bounds(Rect(0.0, 0.0, 1.0, 1.0), Rect(0.0, 0.0, 0.0, 100.0))
        self.assertFalse(bounds.is_finite())

    def test_nothing_stays_non_finite(self) -> None:
        bounds = compute_plot_bounds(Rect.NOTHING, Rect(0.0, 0.0, 100.0, 100.0), symmetrical_x=True)
        self.assertFalse(bounds.is_finite())


if __name__ == "__main__":
    unittest.main()
