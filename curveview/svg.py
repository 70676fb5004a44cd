from __future__ import annotations

from dataclasses import dataclass
import xml.etree.ElementTree as ET

from curveview.scene import LineShape, PlotScene, TextShape, format_number


SVG_NS = "http://www.w3.org/2000/svg"
_CLIP_ID = "curveview-plot-area"


@dataclass(frozen=True)
class SvgTheme:
    axis: str = "#6b7280"
    curve: str = "#3b82f6"
    marker: str = "#3b82f6"
    marker_hovered: str = "#2563eb"
    marker_stroke: str = "#ffffff"
    tooltip_bg: str = "rgba(0, 0, 0, 0.8)"
    tooltip_text: str = "#ffffff"
    reference: str = "#ef4444"
    query: str = "#10b981"
    font_size_tick: int = 10
    font_size_title: int = 12


def scene_to_svg(scene: PlotScene, theme: SvgTheme | None = None) -> str:
    theme = theme or SvgTheme()
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": format_number(scene.width),
            "height": format_number(scene.height),
            "viewBox": f"0 0 {format_number(scene.width)} {format_number(scene.height)}",
        },
    )
    if scene.empty:
        text = ET.SubElement(
            root,
            "text",
            {
                "class": "empty-state",
                "x": format_number(scene.width / 2),
                "y": format_number(scene.height / 2),
                "text-anchor": "middle",
                "fill": theme.axis,
            },
        )
        text.text = scene.message or ""
        return ET.tostring(root, encoding="unicode")
    if scene.plot_rect is None:
        return ET.tostring(root, encoding="unicode")

    left, top, right, bottom = scene.plot_rect
    defs = ET.SubElement(root, "defs")
    clip = ET.SubElement(defs, "clipPath", {"id": _CLIP_ID})
    ET.SubElement(
        clip,
        "rect",
        {"x": format_number(left), "y": format_number(top), "width": format_number(max(0.0, right - left)), "height": format_number(max(0.0, bottom - top))},
    )

    for line in scene.axis_lines:
        _line(root, line, theme.axis, "axis")
    for mark in scene.ticks:
        tick = mark.tick
        group = ET.SubElement(
            root,
            "g",
            {
                "class": "tick clickable" if tick.clickable else "tick",
                "data-axis": tick.axis,
                "data-value": mark.label.text,
            },
        )
        _line(group, mark.mark, theme.axis)
        attrs = {"dominant-baseline": "middle"} if tick.axis == "y" else {}
        _text(group, mark.label, theme.axis, theme.font_size_tick, **attrs)
    for title in scene.axis_titles:
        _text(root, title, theme.axis, theme.font_size_title, **{"class": "axis-title"})

    plot = ET.SubElement(root, "g", {"clip-path": f"url(#{_CLIP_ID})"})
    for guide in scene.guides:
        color = theme.reference if guide.role == "reference" else theme.query
        group = ET.SubElement(plot, "g", {"class": f"guide {guide.role}"})
        _line(group, guide.vertical, color, dash="4 4")
        _line(group, guide.horizontal, color, dash="4 4")
        ix, iy = guide.intersection
        ET.SubElement(group, "circle", {"cx": format_number(ix), "cy": format_number(iy), "r": "5", "fill": color})
        _text(group, guide.label, color, theme.font_size_tick)
    if scene.path:
        ET.SubElement(
            plot,
            "path",
            {
                "d": scene.path,
                "fill": "none",
                "stroke": theme.curve,
                "stroke-width": "2",
                "stroke-opacity": "0.7",
            },
        )
    for marker in scene.markers:
        ET.SubElement(
            plot,
            "circle",
            {
                "class": "point hovered" if marker.hovered else "point",
                "data-index": str(marker.index),
                "cx": format_number(marker.cx),
                "cy": format_number(marker.cy),
                "r": format_number(marker.r),
                "fill": theme.marker_hovered if marker.hovered else theme.marker,
                "stroke": theme.marker_stroke,
                "stroke-width": "1",
            },
        )

    if scene.tooltip is not None:
        tip = scene.tooltip
        group = ET.SubElement(root, "g", {"class": "tooltip"})
        ET.SubElement(
            group,
            "rect",
            {
                "x": format_number(tip.x - 50),
                "y": format_number(tip.y - 25),
                "width": "100",
                "height": "20",
                "rx": "4",
                "fill": theme.tooltip_bg,
            },
        )
        _text(group, TextShape(tip.x, tip.y - 15, tip.text), theme.tooltip_text, theme.font_size_tick)
    return ET.tostring(root, encoding="unicode")


def _line(parent: ET.Element, line: LineShape, color: str, css_class: str | None = None, *, dash: str | None = None) -> ET.Element:
    attrs = {
        "x1": format_number(line.x1),
        "y1": format_number(line.y1),
        "x2": format_number(line.x2),
        "y2": format_number(line.y2),
        "stroke": color,
        "stroke-width": "1",
    }
    if css_class:
        attrs["class"] = css_class
    if dash:
        attrs["stroke-dasharray"] = dash
    return ET.SubElement(parent, "line", attrs)


def _text(parent: ET.Element, shape: TextShape, color: str, font_size: int, **extra: str) -> ET.Element:
    attrs = {
        "x": format_number(shape.x),
        "y": format_number(shape.y),
        "text-anchor": shape.anchor,
        "font-size": str(font_size),
        "fill": color,
    }
    if shape.rotate_deg:
        attrs["transform"] = f"rotate({format_number(shape.rotate_deg)}, {format_number(shape.x)}, {format_number(shape.y)})"
    attrs.update(extra)
    node = ET.SubElement(parent, "text", attrs)
    node.text = shape.text
    return node
