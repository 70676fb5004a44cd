from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np

from curveview.points import Point, points_as_array
from curveview.viewport import Axis


TriggerKind = Literal["automatic-reference", "user-click"]


@dataclass(frozen=True)
class AxisQueryResult:
    axis: Axis
    queried_value: float
    graph_intersection: Point
    other_axis_value: float
    trigger_kind: TriggerKind


def interpolate(points: Sequence[Point], axis: Axis, target: float) -> float | None:
    """Return the other-axis value where the curve crosses `target`.

    The curve is the piecewise-linear path through the points sorted by
    `axis`. Returns None when `target` is outside the observed range.
    """

    if axis not in {"x", "y"}:
        raise ValueError("axis must be 'x' or 'y'")
    if len(points) == 0:
        return None
    arr = points_as_array(points)
    main_col = 0 if axis == "x" else 1
    order = np.argsort(arr[:, main_col], kind="stable")
    main = arr[order, main_col].tolist()
    other = arr[order, 1 - main_col].tolist()

    t = float(target)
    for i in range(len(main) - 1):
        m1, m2 = main[i], main[i + 1]
        if m1 == t:
            return other[i]
        if m1 < t < m2 or m2 < t < m1:
            return other[i] + (other[i + 1] - other[i]) * (t - m1) / (m2 - m1)
    if main[-1] == t:
        return other[-1]
    return None


def query_axis(
    points: Sequence[Point],
    axis: Axis,
    target: float,
    trigger: TriggerKind,
) -> AxisQueryResult | None:
    other = interpolate(points, axis, target)
    if other is None:
        return None
    t = float(target)
    intersection = Point(t, other) if axis == "x" else Point(other, t)
    return AxisQueryResult(
        axis=axis,
        queried_value=t,
        graph_intersection=intersection,
        other_axis_value=other,
        trigger_kind=trigger,
    )


def reference_axis(x_label: str, y_label: str, keyword: str = "ph") -> Axis | None:
    needle = keyword.lower()
    if needle in (x_label or "").lower():
        return "x"
    if needle in (y_label or "").lower():
        return "y"
    return None
