from __future__ import annotations

import unittest

import numpy as np

from curveview import Point, compute_extent, fit_viewport
from curveview.config import PaddingSpec
from curveview.ticks import axis_ticks, format_tick, generate_ticks, is_clickable_label, nice_step


class NiceTickTests(unittest.TestCase):
    def test_step_uses_one_two_five_sequence(self) -> None:
        self.assertAlmostEqual(nice_step(0.0, 10.0, 5), 2.0)
        self.assertAlmostEqual(nice_step(0.0, 1.0, 3), 0.2)
        self.assertAlmostEqual(nice_step(0.0, 100.0, 3), 20.0)
        self.assertAlmostEqual(nice_step(0.0, 0.04, 5), 0.01)
        self.assertAlmostEqual(nice_step(0.0, 25.0, 5), 5.0)

    def test_zero_to_ninety_seven_with_five_targets(self) -> None:
        ticks, step = generate_ticks(0.0, 97.0, 5)
        self.assertLessEqual(ticks.size, 6)
        self.assertEqual(step, 20.0)
        self.assertEqual(ticks.tolist(), [0.0, 20.0, 40.0, 60.0, 80.0])
        self.assertLess(abs(ticks[0] - 0.0), step)
        self.assertLess(abs(97.0 - ticks[-1]), step)

    def test_degenerate_range_returns_single_tick(self) -> None:
        ticks, step = generate_ticks(3.0, 3.0, 5)
        self.assertEqual(ticks.tolist(), [3.0])
        self.assertEqual(step, 0.0)

    def test_float_round_off_does_not_drop_edge_ticks(self) -> None:
        ticks, step = generate_ticks(0.1 + 0.2, 0.7, 4)
        self.assertAlmostEqual(step, 0.1)
        self.assertEqual(ticks.size, 5)
        self.assertAlmostEqual(float(ticks[0]), 0.3)
        self.assertAlmostEqual(float(ticks[-1]), 0.7)

    def test_negative_ranges_snap_zero(self) -> None:
        ticks, _ = generate_ticks(-1.0, 1.0, 4)
        self.assertTrue(np.any(ticks == 0.0))
        self.assertFalse(np.any(np.signbit(ticks[ticks == 0.0])))

    def test_formatting_decimals_follow_step(self) -> None:
        self.assertEqual(format_tick(0.005, 0.005), "0.005")
        self.assertEqual(format_tick(0.25, 0.05), "0.25")
        self.assertEqual(format_tick(2.5, 0.5), "2.5")
        self.assertEqual(format_tick(40.0, 20.0), "40")
        self.assertEqual(format_tick(-0.0001, 0.5), "0.0")

    def test_clickable_labels_are_integers(self) -> None:
        self.assertTrue(is_clickable_label("40"))
        self.assertTrue(is_clickable_label("2.0"))
        self.assertFalse(is_clickable_label("2.5"))
        self.assertFalse(is_clickable_label("abc"))


class AxisTickTests(unittest.TestCase):
    def test_axis_ticks_follow_the_viewport(self) -> None:
        extent = compute_extent([Point(0.0, 0.0), Point(100.0, 50.0)])
        assert extent is not None
        vp = fit_viewport(extent, 800, 500, PaddingSpec(50.0, 20.0, 20.0, 50.0))
        x_ticks = axis_ticks(vp, "x", 5)
        self.assertEqual([t.label for t in x_ticks], ["0", "20", "40", "60", "80", "100"])
        self.assertTrue(all(t.clickable for t in x_ticks))
        self.assertAlmostEqual(x_ticks[0].position, 50.0)
        y_ticks = axis_ticks(vp, "y", 5)
        self.assertEqual([t.label for t in y_ticks], ["0", "10", "20", "30", "40", "50"])
        self.assertAlmostEqual(y_ticks[0].position, 450.0)
        self.assertAlmostEqual(y_ticks[-1].position, 20.0)

    def test_fractional_ticks_are_not_clickable(self) -> None:
        extent = compute_extent([Point(0.0, 0.0), Point(2.0, 1.0)])
        assert extent is not None
        vp = fit_viewport(extent, 800, 500, PaddingSpec(50.0, 20.0, 20.0, 50.0))
        x_ticks = axis_ticks(vp, "x", 5)
        self.assertEqual([t.label for t in x_ticks], ["0.0", "0.5", "1.0", "1.5", "2.0"])
        self.assertEqual([t.clickable for t in x_ticks], [True, False, True, False, True])


if __name__ == "__main__":
    unittest.main()
