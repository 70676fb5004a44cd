from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Callable, Literal

from curveview.config import ViewerConfig
from curveview.events import InputEvent
from curveview.extent import compute_extent
from curveview.interpolate import AxisQueryResult, query_axis, reference_axis
from curveview.points import Point, normalize_points
from curveview.resize import ResizeCoalescer, ResizeSource, Unsubscribe
from curveview.scene import PlotScene, build_scene
from curveview.ticks import Tick, axis_ticks
from curveview.viewport import Axis, Viewport, fit_viewport
from curveview.zoom import InitialView, apply_pan, apply_wheel_zoom


LOGGER = logging.getLogger(__name__)

LineStyle = Literal["sharp", "smooth"]
HoverCallback = Callable[[Point | None], None]

_INTEGER_TOLERANCE = 1e-9


@dataclass
class ViewerState:
    """Everything the scene projection reads; mutated only by `PlotViewer`."""

    points: tuple[Point, ...] = ()
    x_label: str = ""
    y_label: str = ""
    line_style: LineStyle = "smooth"
    width: float = 0.0
    height: float = 0.0
    viewport: Viewport | None = None
    initial_view: InitialView | None = None
    user_navigated: bool = False
    hovered_index: int | None = None
    clicked_query: AxisQueryResult | None = None
    reference: AxisQueryResult | None = None

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def hovered_point(self) -> Point | None:
        if self.hovered_index is None:
            return None
        return self.points[self.hovered_index]


class PlotViewer:
    """Interactive point-plot viewer core.

    Owns the viewport and selection state for one plot. Every public
    method is a synchronous state transition; `render()` projects the
    current state into a `PlotScene`.
    """

    def __init__(
        self,
        *,
        on_hover: HoverCallback | None = None,
        config: ViewerConfig | None = None,
        points: Any = (),
        x_label: str = "",
        y_label: str = "",
        line_style: LineStyle = "smooth",
    ) -> None:
        self._config = config or ViewerConfig()
        self._on_hover = on_hover or (lambda point: None)
        self._state = ViewerState(x_label=x_label, y_label=y_label)
        self._resize_queue = ResizeCoalescer()
        self._unsubscribe_resize: Unsubscribe | None = None
        self.set_line_style(line_style)
        self.set_points(points)

    @property
    def state(self) -> ViewerState:
        return self._state

    @property
    def config(self) -> ViewerConfig:
        return self._config

    def set_points(self, values: Any) -> None:
        state = self._state
        state.points = normalize_points(values)
        state.clicked_query = None
        self._clear_hover()
        state.user_navigated = False
        if state.is_empty:
            state.viewport = None
            state.initial_view = None
            LOGGER.debug("point set is empty; viewer shows the no-data placeholder")
        else:
            self._refit()
        self._recompute_reference()

    def set_axis_labels(self, x_label: str, y_label: str) -> None:
        self._state.x_label = x_label or ""
        self._state.y_label = y_label or ""
        self._recompute_reference()

    def set_line_style(self, line_style: LineStyle) -> None:
        if line_style not in {"sharp", "smooth"}:
            raise ValueError("line_style must be 'sharp' or 'smooth'")
        self._state.line_style = line_style

    def attach_resize_source(self, source: ResizeSource) -> None:
        self.detach_resize_source()
        self._unsubscribe_resize = source.subscribe(self.notify_resize)

    def detach_resize_source(self) -> None:
        if self._unsubscribe_resize is not None:
            self._unsubscribe_resize()
            self._unsubscribe_resize = None

    def notify_resize(self, width: float, height: float) -> None:
        self._resize_queue.push(width, height)

    def flush_layout(self) -> bool:
        pending = self._resize_queue.take()
        if pending is None:
            return False
        self.resize(*pending)
        return True

    def resize(self, width: float, height: float) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        state = self._state
        state.width = float(width)
        state.height = float(height)
        if state.user_navigated and state.viewport is not None:
            padding = self._config.padding_for_width(state.width)
            state.viewport = state.viewport.with_dimensions(state.width, state.height, padding)
            return
        self._refit()

    def wheel(self, screen_x: float, screen_y: float, delta_y: float) -> bool:
        state = self._state
        if not self._has_layout() or state.viewport is None or state.initial_view is None:
            return False
        cfg = self._config
        state.viewport = apply_wheel_zoom(
            state.viewport,
            state.initial_view,
            screen_x,
            screen_y,
            delta_y,
            sensitivity=cfg.zoom_sensitivity,
            delta_scale=cfg.zoom_delta_scale,
            min_ratio=cfg.min_zoom_ratio,
            max_ratio=cfg.max_zoom_ratio,
        )
        state.user_navigated = True
        self._clear_hover()
        return True

    def pan(self, delta_x_px: float, delta_y_px: float) -> bool:
        state = self._state
        if not self._has_layout() or state.viewport is None:
            return False
        state.viewport = apply_pan(state.viewport, delta_x_px, delta_y_px)
        state.user_navigated = True
        self._clear_hover()
        return True

    def reset_view(self) -> None:
        self._state.user_navigated = False
        self._refit()

    def hover_point(self, index: int) -> None:
        state = self._state
        if not 0 <= index < len(state.points):
            LOGGER.debug("ignoring hover on unknown point index %s", index)
            return
        state.hovered_index = index
        state.clicked_query = None
        self._on_hover(state.points[index])

    def leave_point(self) -> None:
        self._state.hovered_index = None
        self._on_hover(None)

    def click_tick(self, axis: Axis, value: float) -> AxisQueryResult | None:
        state = self._state
        if axis not in {"x", "y"}:
            raise ValueError("axis must be 'x' or 'y'")
        if not math.isfinite(float(value)):
            return None
        target = self._click_target(axis, float(value))
        if target is None:
            LOGGER.debug("tick %s=%s is not click-enabled", axis, value)
            return None
        result = query_axis(state.points, axis, target, "user-click")
        state.clicked_query = result
        if result is None:
            LOGGER.debug("%s=%s is outside the plotted range", axis, target)
            return None
        self._clear_hover()
        return result

    def click_background(self) -> None:
        self._state.clicked_query = None
        self._state.hovered_index = None
        self._on_hover(None)

    def dispatch(self, event: InputEvent) -> None:
        kind = event.event_type
        if kind == "wheel":
            self.wheel(event.x or 0.0, event.y or 0.0, event.delta_y or 0.0)
        elif kind == "drag":
            self.pan(event.delta_x or 0.0, event.delta_y or 0.0)
        elif kind == "point_enter":
            if event.point_index is not None:
                self.hover_point(event.point_index)
        elif kind == "point_leave":
            self.leave_point()
        elif kind == "tick_click":
            if event.axis is not None and event.value is not None:
                self.click_tick(event.axis, event.value)
        elif kind == "background_click":
            self.click_background()
        else:
            raise ValueError(f"unsupported event type: {kind}")

    def ticks(self, axis: Axis) -> tuple[Tick, ...]:
        viewport = self._state.viewport
        if viewport is None or not self._has_layout():
            return ()
        return axis_ticks(viewport, axis, self._config.tick_count_for_width(self._state.width))

    def render(self) -> PlotScene:
        return build_scene(self._state, self._config)

    def _refit(self) -> None:
        state = self._state
        if state.is_empty or state.width <= 0 or state.height <= 0:
            return
        extent = compute_extent(state.points)
        if extent is None:
            return
        padding = self._config.padding_for_width(state.width)
        state.viewport = fit_viewport(extent, state.width, state.height, padding)
        if state.initial_view is None:
            state.initial_view = InitialView.capture(state.viewport)
            LOGGER.debug("captured initial view scale=%s", state.initial_view.scale)

    def _has_layout(self) -> bool:
        return self._state.width > 0 and self._state.height > 0

    def _click_target(self, axis: Axis, value: float) -> float | None:
        # Rendered ticks decide by their label; other values must be integers.
        for tick in self.ticks(axis):
            if math.isclose(tick.value, value, rel_tol=_INTEGER_TOLERANCE, abs_tol=1e-12):
                return tick.value if tick.clickable else None
        target = round(value)
        if abs(value - target) > _INTEGER_TOLERANCE:
            return None
        return float(target)

    def _clear_hover(self) -> None:
        if self._state.hovered_index is None:
            return
        self._state.hovered_index = None
        self._on_hover(None)

    def _recompute_reference(self) -> None:
        state = self._state
        axis = reference_axis(state.x_label, state.y_label, self._config.reference_keyword)
        if axis is None or state.is_empty:
            state.reference = None
            return
        state.reference = query_axis(state.points, axis, self._config.reference_value, "automatic-reference")
