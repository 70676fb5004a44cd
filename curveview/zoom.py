from __future__ import annotations

from dataclasses import dataclass, replace

from curveview.viewport import Axis, Vec2, Viewport


@dataclass(frozen=True)
class InitialView:
    scale: Vec2
    offset: Vec2

    @classmethod
    def capture(cls, viewport: Viewport) -> "InitialView":
        return cls(scale=viewport.scale, offset=viewport.offset)


def zoom_bounds(initial: InitialView, axis: Axis, *, min_ratio: float = 0.5, max_ratio: float = 20.0) -> tuple[float, float]:
    base = initial.scale.x if axis == "x" else initial.scale.y
    return (base * min_ratio, base * max_ratio)


def wheel_zoom_factor(delta_y: float, *, sensitivity: float = 0.1, delta_scale: float = 0.01) -> float:
    # Negative wheel deltas (scrolling up) zoom in.
    return 1.0 - float(delta_y) * sensitivity * delta_scale


def apply_wheel_zoom(
    viewport: Viewport,
    initial: InitialView,
    screen_x: float,
    screen_y: float,
    delta_y: float,
    *,
    sensitivity: float = 0.1,
    delta_scale: float = 0.01,
    min_ratio: float = 0.5,
    max_ratio: float = 20.0,
) -> Viewport:
    """Zoom about the cursor so the data point under it stays in place."""

    anchor = viewport.to_data(screen_x, screen_y)
    factor = wheel_zoom_factor(delta_y, sensitivity=sensitivity, delta_scale=delta_scale)
    lo_x, hi_x = zoom_bounds(initial, "x", min_ratio=min_ratio, max_ratio=max_ratio)
    lo_y, hi_y = zoom_bounds(initial, "y", min_ratio=min_ratio, max_ratio=max_ratio)
    scale = Vec2(
        _clamp(viewport.scale.x * factor, lo_x, hi_x),
        _clamp(viewport.scale.y * factor, lo_y, hi_y),
    )
    cursor_dx = screen_x - viewport.padding.left
    cursor_dy = viewport.height - screen_y - viewport.padding.bottom
    offset = Vec2(anchor.x - cursor_dx / scale.x, anchor.y - cursor_dy / scale.y)
    return replace(viewport, scale=scale, offset=offset)


def apply_pan(viewport: Viewport, delta_x_px: float, delta_y_px: float) -> Viewport:
    # Screen y points down, so dragging down reveals smaller data y.
    offset = Vec2(
        viewport.offset.x - float(delta_x_px) / viewport.scale.x,
        viewport.offset.y + float(delta_y_px) / viewport.scale.y,
    )
    return replace(viewport, offset=offset)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
