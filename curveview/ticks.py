from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from curveview.points import Point
from curveview.viewport import Axis, Viewport


_TICK_EPS = 1e-9
_PIXEL_EPS = 0.5


@dataclass(frozen=True)
class Tick:
    axis: Axis
    value: float
    label: str
    position: float
    clickable: bool


def nice_step(lo: float, hi: float, target: int) -> float:
    if target <= 0:
        raise ValueError("target must be > 0")
    raw_step = (hi - lo) / target
    if not math.isfinite(raw_step) or raw_step <= 0:
        return 0.0
    exponent = math.floor(math.log10(raw_step))
    magnitude = 10.0**exponent
    mantissa = raw_step / magnitude
    if mantissa < 1.5:
        nice = 1.0
    elif mantissa < 3.5:
        nice = 2.0
    elif mantissa < 7.5:
        nice = 5.0
    else:
        nice = 10.0
    return nice * magnitude


def generate_ticks(lo: float, hi: float, target: int) -> tuple[np.ndarray, float]:
    """Return `(ticks, step)` for the range `[lo, hi]`.

    A degenerate range yields a single tick at `lo` and a step of 0.
    """

    step = nice_step(lo, hi, target)
    if step == 0.0:
        return np.asarray([lo], dtype=np.float64), 0.0
    first = math.ceil(lo / step - _TICK_EPS)
    last = math.floor(hi / step + _TICK_EPS)
    if last < first:
        return np.empty(0, dtype=np.float64), step
    ticks = np.arange(first, last + 1, dtype=np.float64) * step
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * _TICK_EPS)] = 0.0
    return ticks, step


def tick_decimals(step: float) -> int:
    if step < 0.01:
        return 3
    if step < 0.1:
        return 2
    if step < 1:
        return 1
    return 0


def format_tick(value: float, step: float) -> str:
    out = f"{value:.{tick_decimals(step)}f}"
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def is_clickable_label(label: str) -> bool:
    try:
        value = float(label)
    except ValueError:
        return False
    return math.isfinite(value) and value.is_integer()


def axis_ticks(viewport: Viewport, axis: Axis, target: int) -> tuple[Tick, ...]:
    lo, hi = viewport.visible_range(axis)
    values, step = generate_ticks(lo, hi, target)
    left, top, right, bottom = viewport.plot_rect()
    out: list[Tick] = []
    for value in values.tolist():
        if axis == "x":
            position = viewport.to_screen(Point(value, viewport.offset.y))[0]
            visible = left - _PIXEL_EPS <= position <= right + _PIXEL_EPS
        else:
            position = viewport.to_screen(Point(viewport.offset.x, value))[1]
            visible = top - _PIXEL_EPS <= position <= bottom + _PIXEL_EPS
        if not visible:
            continue
        label = format_tick(value, step)
        out.append(
            Tick(
                axis=axis,
                value=float(value),
                label=label,
                position=position,
                clickable=is_clickable_label(label),
            )
        )
    return tuple(out)
