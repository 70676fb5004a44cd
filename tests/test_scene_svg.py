from __future__ import annotations

import unittest
import xml.etree.ElementTree as ET

from curveview import PlotViewer, scene_to_svg
from curveview.scene import build_path
from curveview.svg import SVG_NS


SAMPLE = [
    {"x": 5, "y": 10},
    {"x": 6, "y": 12},
    {"x": 7.5, "y": 18},
    {"x": 8, "y": 20},
    {"x": 9, "y": 15},
]


def _tag(name: str) -> str:
    return f"{{{SVG_NS}}}{name}"


class PathTests(unittest.TestCase):
    def test_sharp_path_uses_straight_segments(self) -> None:
        self.assertEqual(build_path([(0.0, 0.0), (10.0, 20.0), (15.5, 5.0)], "sharp"), "M 0 0 L 10 20 L 15.5 5")

    def test_smooth_path_uses_midpoint_cubics(self) -> None:
        self.assertEqual(build_path([(0.0, 0.0), (10.0, 20.0)], "smooth"), "M 0 0 C 5 0, 5 20, 10 20")

    def test_single_point_has_no_path(self) -> None:
        self.assertEqual(build_path([(1.0, 1.0)], "sharp"), "")


class SceneTests(unittest.TestCase):
    def test_no_geometry_before_first_layout(self) -> None:
        viewer = PlotViewer(points=SAMPLE)
        scene = viewer.render()
        self.assertFalse(scene.empty)
        self.assertIsNone(scene.plot_rect)
        self.assertEqual(scene.markers, ())

    def test_scene_projects_points_in_input_order(self) -> None:
        viewer = PlotViewer(points=SAMPLE, line_style="sharp")
        viewer.resize(800, 500)
        scene = viewer.render()
        self.assertEqual(len(scene.markers), 5)
        self.assertEqual((scene.markers[0].cx, scene.markers[0].cy), (50.0, 450.0))
        self.assertTrue(scene.path.startswith("M 50 450 L 232.5 364"))
        self.assertEqual(scene.plot_rect, (50.0, 20.0, 780.0, 450.0))
        self.assertEqual(len(scene.axis_lines), 2)

    def test_hovered_marker_and_tooltip(self) -> None:
        viewer = PlotViewer(points=SAMPLE)
        viewer.resize(800, 500)
        viewer.hover_point(1)
        scene = viewer.render()
        self.assertEqual(scene.markers[1].r, 6.0)
        self.assertTrue(scene.markers[1].hovered)
        self.assertEqual(scene.markers[0].r, 4.0)
        assert scene.tooltip is not None
        self.assertEqual(scene.tooltip.text, "X: 6.00, Y: 12.00")
        self.assertAlmostEqual(scene.tooltip.x, 232.5)
        self.assertAlmostEqual(scene.tooltip.y, 344.0)

    def test_reference_and_query_guides(self) -> None:
        viewer = PlotViewer(points=SAMPLE, x_label="pH", y_label="Concentration")
        viewer.resize(800, 500)
        viewer.click_tick("x", 8)
        scene = viewer.render()
        self.assertEqual([g.role for g in scene.guides], ["reference", "query"])
        reference = scene.guides[0]
        self.assertEqual(reference.label.text, "pH: 7.00, Concentration: 16.00")
        ix, iy = reference.intersection
        self.assertAlmostEqual(ix, 415.0)
        self.assertAlmostEqual(reference.vertical.y1, 450.0)
        self.assertAlmostEqual(reference.horizontal.x1, 50.0)
        self.assertAlmostEqual(reference.horizontal.y2, iy)

    def test_clickable_ticks_exposed(self) -> None:
        viewer = PlotViewer(points=SAMPLE)
        viewer.resize(800, 500)
        ticks = viewer.render().clickable_ticks()
        self.assertIn(("x", 7.0), [(t.axis, t.value) for t in ticks])


class SvgTests(unittest.TestCase):
    def test_empty_scene_renders_placeholder(self) -> None:
        viewer = PlotViewer(points=[])
        viewer.resize(400, 300)
        root = ET.fromstring(scene_to_svg(viewer.render()))
        texts = [node.text for node in root.iter(_tag("text"))]
        self.assertEqual(texts, [viewer.config.empty_message])

    def test_svg_contains_points_ticks_and_tooltip(self) -> None:
        viewer = PlotViewer(points=SAMPLE, x_label="pH", y_label="Concentration")
        viewer.resize(800, 500)
        viewer.hover_point(3)
        root = ET.fromstring(scene_to_svg(viewer.render()))
        points = [c for c in root.iter(_tag("circle")) if "point" in c.get("class", "")]
        self.assertEqual(len(points), 5)
        self.assertEqual([c.get("r") for c in points if "hovered" in c.get("class", "")], ["6"])
        clickable = [g for g in root.iter(_tag("g")) if g.get("class") == "tick clickable"]
        self.assertGreater(len(clickable), 0)
        tooltip_texts = [t.text for g in root.iter(_tag("g")) if g.get("class") == "tooltip" for t in g.iter(_tag("text"))]
        self.assertEqual(tooltip_texts, ["X: 8.00, Y: 20.00"])
        paths = list(root.iter(_tag("path")))
        self.assertEqual(len(paths), 1)
        self.assertIn(" C ", paths[0].get("d", ""))


if __name__ == "__main__":
    unittest.main()
