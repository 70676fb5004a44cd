from __future__ import annotations

import unittest

from curveview import InitialView, Point, apply_pan, apply_wheel_zoom, compute_extent, fit_viewport
from curveview.config import PaddingSpec
from curveview.viewport import Viewport
from curveview.zoom import wheel_zoom_factor, zoom_bounds


def _fitted() -> Viewport:
    extent = compute_extent([Point(0.0, 0.0), Point(10.0, 5.0)])
    assert extent is not None
    return fit_viewport(extent, 800, 500, PaddingSpec(50.0, 20.0, 20.0, 50.0))


class WheelZoomTests(unittest.TestCase):
    def test_factor_from_wheel_delta(self) -> None:
        self.assertAlmostEqual(wheel_zoom_factor(-100.0), 1.1)
        self.assertAlmostEqual(wheel_zoom_factor(100.0), 0.9)
        self.assertEqual(wheel_zoom_factor(0.0), 1.0)

    def test_zoom_keeps_data_under_cursor(self) -> None:
        vp = _fitted()
        initial = InitialView.capture(vp)
        before = vp.to_data(300.0, 200.0)
        zoomed = apply_wheel_zoom(vp, initial, 300.0, 200.0, -100.0)
        after = zoomed.to_data(300.0, 200.0)
        self.assertAlmostEqual(zoomed.scale.x, 73.0 * 1.1)
        self.assertAlmostEqual(zoomed.scale.y, 86.0 * 1.1)
        self.assertAlmostEqual(after.x, before.x, places=9)
        self.assertAlmostEqual(after.y, before.y, places=9)

    def test_repeated_zoom_in_converges_to_upper_bound(self) -> None:
        vp = _fitted()
        initial = InitialView.capture(vp)
        for _ in range(200):
            vp = apply_wheel_zoom(vp, initial, 400.0, 250.0, -120.0)
            self.assertLessEqual(vp.scale.x, initial.scale.x * 20.0)
            self.assertLessEqual(vp.scale.y, initial.scale.y * 20.0)
        self.assertAlmostEqual(vp.scale.x, initial.scale.x * 20.0)
        self.assertAlmostEqual(vp.scale.y, initial.scale.y * 20.0)

    def test_zoom_out_is_clamped_and_stays_positive(self) -> None:
        vp = _fitted()
        initial = InitialView.capture(vp)
        vp = apply_wheel_zoom(vp, initial, 400.0, 250.0, 5000.0)
        lo_x, _ = zoom_bounds(initial, "x")
        lo_y, _ = zoom_bounds(initial, "y")
        self.assertAlmostEqual(vp.scale.x, lo_x)
        self.assertAlmostEqual(vp.scale.y, lo_y)
        self.assertGreater(vp.scale.x, 0.0)

    def test_round_trip_holds_after_zoom(self) -> None:
        vp = _fitted()
        initial = InitialView.capture(vp)
        vp = apply_wheel_zoom(vp, initial, 123.0, 77.0, -250.0)
        for sx, sy in [(0.0, 0.0), (640.0, 480.0), (55.5, 444.4)]:
            rx, ry = vp.to_screen(vp.to_data(sx, sy))
            self.assertAlmostEqual(rx, sx, delta=1e-6)
            self.assertAlmostEqual(ry, sy, delta=1e-6)


class PanTests(unittest.TestCase):
    def test_drag_shifts_offset_in_data_units(self) -> None:
        vp = apply_pan(_fitted(), 73.0, -86.0)
        self.assertAlmostEqual(vp.offset.x, -1.0)
        self.assertAlmostEqual(vp.offset.y, -1.0)
        self.assertAlmostEqual(vp.scale.x, 73.0)


if __name__ == "__main__":
    unittest.main()
