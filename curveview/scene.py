from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Sequence

from curveview.config import ViewerConfig
from curveview.interpolate import AxisQueryResult
from curveview.points import points_as_array
from curveview.ticks import Tick, axis_ticks
from curveview.viewport import Viewport

if TYPE_CHECKING:
    from curveview.viewer import ViewerState


TextAnchor = Literal["start", "middle", "end"]
GuideRole = Literal["reference", "query"]

_TICK_MARK_PX = 5.0
_X_TICK_LABEL_GAP_PX = 15.0
_Y_TICK_LABEL_GAP_PX = 10.0


@dataclass(frozen=True)
class LineShape:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class TextShape:
    x: float
    y: float
    text: str
    anchor: TextAnchor = "middle"
    rotate_deg: float = 0.0


@dataclass(frozen=True)
class TickMark:
    tick: Tick
    mark: LineShape
    label: TextShape


@dataclass(frozen=True)
class Marker:
    index: int
    cx: float
    cy: float
    r: float
    hovered: bool


@dataclass(frozen=True)
class Tooltip:
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class QueryGuide:
    role: GuideRole
    result: AxisQueryResult
    vertical: LineShape
    horizontal: LineShape
    intersection: tuple[float, float]
    label: TextShape


@dataclass(frozen=True)
class PlotScene:
    width: float
    height: float
    empty: bool = False
    message: str | None = None
    plot_rect: tuple[float, float, float, float] | None = None
    axis_lines: tuple[LineShape, ...] = ()
    ticks: tuple[TickMark, ...] = ()
    axis_titles: tuple[TextShape, ...] = ()
    path: str = ""
    markers: tuple[Marker, ...] = ()
    tooltip: Tooltip | None = None
    guides: tuple[QueryGuide, ...] = ()

    def clickable_ticks(self) -> tuple[Tick, ...]:
        return tuple(mark.tick for mark in self.ticks if mark.tick.clickable)


def build_scene(state: "ViewerState", config: ViewerConfig) -> PlotScene:
    if state.is_empty:
        return PlotScene(width=state.width, height=state.height, empty=True, message=config.empty_message)
    viewport = state.viewport
    if viewport is None or state.width <= 0 or state.height <= 0:
        return PlotScene(width=state.width, height=state.height)

    left, top, right, bottom = viewport.plot_rect()
    target = config.tick_count_for_width(state.width)
    ticks = tuple(
        _tick_mark(tick, viewport) for axis in ("x", "y") for tick in axis_ticks(viewport, axis, target)
    )
    screen = viewport.to_screen_array(points_as_array(state.points))
    screen_points = [(float(sx), float(sy)) for sx, sy in screen.tolist()]

    markers = tuple(
        Marker(
            index=i,
            cx=sx,
            cy=sy,
            r=config.hovered_marker_radius if i == state.hovered_index else config.marker_radius,
            hovered=i == state.hovered_index,
        )
        for i, (sx, sy) in enumerate(screen_points)
    )

    tooltip = None
    hovered = state.hovered_point
    if hovered is not None and state.hovered_index is not None:
        sx, sy = screen_points[state.hovered_index]
        tooltip = Tooltip(x=sx, y=sy - config.tooltip_offset_px, text=f"X: {hovered.x:.2f}, Y: {hovered.y:.2f}")

    guides: list[QueryGuide] = []
    if state.reference is not None:
        guides.append(_query_guide("reference", state.reference, viewport, state))
    if state.clicked_query is not None:
        guides.append(_query_guide("query", state.clicked_query, viewport, state))

    return PlotScene(
        width=state.width,
        height=state.height,
        plot_rect=(left, top, right, bottom),
        axis_lines=(
            LineShape(left, bottom, right, bottom),
            LineShape(left, top, left, bottom),
        ),
        ticks=ticks,
        axis_titles=(
            TextShape(right, state.height - viewport.padding.bottom / 2, state.x_label, anchor="end"),
            TextShape(viewport.padding.left / 2, top, state.y_label, anchor="middle", rotate_deg=-90.0),
        ),
        path=build_path(screen_points, state.line_style),
        markers=markers,
        tooltip=tooltip,
        guides=tuple(guides),
    )


def build_path(screen_points: Sequence[tuple[float, float]], line_style: str) -> str:
    """SVG path data through the points in input order.

    `sharp` joins them with straight segments; `smooth` uses cubic curves
    whose control points sit at the horizontal midpoint of each segment.
    """

    if len(screen_points) < 2:
        return ""
    x0, y0 = screen_points[0]
    parts = [f"M {format_number(x0)} {format_number(y0)}"]
    if line_style == "sharp":
        parts.extend(f"L {format_number(x)} {format_number(y)}" for x, y in screen_points[1:])
        return " ".join(parts)
    for (cx, cy), (nx, ny) in zip(screen_points, screen_points[1:]):
        mid = (cx + nx) / 2
        parts.append(f"C {format_number(mid)} {format_number(cy)}, {format_number(mid)} {format_number(ny)}, {format_number(nx)} {format_number(ny)}")
    return " ".join(parts)


def _tick_mark(tick: Tick, viewport: Viewport) -> TickMark:
    left, _, _, bottom = viewport.plot_rect()
    if tick.axis == "x":
        mark = LineShape(tick.position, bottom, tick.position, bottom + _TICK_MARK_PX)
        label = TextShape(tick.position, bottom + _X_TICK_LABEL_GAP_PX, tick.label, anchor="middle")
    else:
        mark = LineShape(left - _TICK_MARK_PX, tick.position, left, tick.position)
        label = TextShape(left - _Y_TICK_LABEL_GAP_PX, tick.position, tick.label, anchor="end")
    return TickMark(tick=tick, mark=mark, label=label)


def _query_guide(role: GuideRole, result: AxisQueryResult, viewport: Viewport, state: "ViewerState") -> QueryGuide:
    left, _, _, bottom = viewport.plot_rect()
    ix, iy = viewport.to_screen(result.graph_intersection)
    x_name = state.x_label or "X"
    y_name = state.y_label or "Y"
    point = result.graph_intersection
    return QueryGuide(
        role=role,
        result=result,
        vertical=LineShape(ix, bottom, ix, iy),
        horizontal=LineShape(left, iy, ix, iy),
        intersection=(ix, iy),
        label=TextShape(ix + 6.0, iy - 6.0, f"{x_name}: {point.x:.2f}, {y_name}: {point.y:.2f}", anchor="start"),
    )


def format_number(value: float) -> str:
    out = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if out in {"-0", ""} else out
