from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

import numpy as np

from curveview.config import PaddingSpec
from curveview.extent import Extent
from curveview.points import Point


Axis = Literal["x", "y"]


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    """Data-to-pixel mapping anchored at the padded lower-left corner.

    `scale` is pixels per data unit and `offset` is the data coordinate
    that lands on the origin of the plot area. Screen y grows downwards.
    """

    scale: Vec2
    offset: Vec2
    padding: PaddingSpec
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.scale.x <= 0 or self.scale.y <= 0:
            raise ValueError("viewport scale must be > 0")
        if self.width < 0 or self.height < 0:
            raise ValueError("viewport width/height must be >= 0")

    def to_screen(self, point: Point) -> tuple[float, float]:
        sx = (point.x - self.offset.x) * self.scale.x + self.padding.left
        sy = self.height - ((point.y - self.offset.y) * self.scale.y + self.padding.bottom)
        return (sx, sy)

    def to_data(self, screen_x: float, screen_y: float) -> Point:
        x = (screen_x - self.padding.left) / self.scale.x + self.offset.x
        y = (self.height - screen_y - self.padding.bottom) / self.scale.y + self.offset.y
        return Point(x, y)

    def to_screen_array(self, xy: np.ndarray) -> np.ndarray:
        out = np.empty_like(xy, dtype=np.float64)
        out[:, 0] = (xy[:, 0] - self.offset.x) * self.scale.x + self.padding.left
        out[:, 1] = self.height - ((xy[:, 1] - self.offset.y) * self.scale.y + self.padding.bottom)
        return out

    def plot_rect(self) -> tuple[float, float, float, float]:
        """Return the padded plot area as `(left, top, right, bottom)` in pixels."""
        return (
            self.padding.left,
            self.padding.top,
            self.width - self.padding.right,
            self.height - self.padding.bottom,
        )

    def visible_range(self, axis: Axis) -> tuple[float, float]:
        left, top, right, bottom = self.plot_rect()
        if axis == "x":
            return (self.to_data(left, bottom).x, self.to_data(right, bottom).x)
        return (self.to_data(left, bottom).y, self.to_data(left, top).y)

    def with_dimensions(self, width: float, height: float, padding: PaddingSpec) -> "Viewport":
        return replace(self, width=float(width), height=float(height), padding=padding)


def fit_viewport(extent: Extent, width: float, height: float, padding: PaddingSpec) -> Viewport:
    # Floor the drawable span at one pixel so tiny containers keep a positive scale.
    plot_w = max(1.0, width - padding.left - padding.right)
    plot_h = max(1.0, height - padding.top - padding.bottom)
    return Viewport(
        scale=Vec2(plot_w / extent.x_range, plot_h / extent.y_range),
        offset=Vec2(extent.min_x, extent.min_y),
        padding=padding,
        width=float(width),
        height=float(height),
    )
