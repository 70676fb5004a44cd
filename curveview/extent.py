from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from curveview.points import Point, points_as_array


@dataclass(frozen=True)
class Extent:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def x_range(self) -> float:
        # A single column of points still needs a non-zero span to scale.
        return (self.max_x - self.min_x) or 1.0

    @property
    def y_range(self) -> float:
        return (self.max_y - self.min_y) or 1.0


def compute_extent(points: Sequence[Point]) -> Extent | None:
    if len(points) == 0:
        return None
    arr = points_as_array(points)
    mins = np.min(arr, axis=0)
    maxs = np.max(arr, axis=0)
    return Extent(
        min_x=float(mins[0]),
        max_x=float(maxs[0]),
        min_y=float(mins[1]),
        max_y=float(maxs[1]),
    )
