from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from curveview.viewport import Axis


EventType = Literal[
    "wheel",
    "drag",
    "point_enter",
    "point_leave",
    "tick_click",
    "background_click",
]


@dataclass(frozen=True)
class InputEvent:
    event_type: EventType
    x: Optional[float] = None
    y: Optional[float] = None
    delta_x: Optional[float] = None
    delta_y: Optional[float] = None
    point_index: Optional[int] = None
    axis: Optional[Axis] = None
    value: Optional[float] = None
