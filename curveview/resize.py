from __future__ import annotations

import logging
from typing import Callable, Protocol


LOGGER = logging.getLogger(__name__)

ResizeCallback = Callable[[float, float], None]
Unsubscribe = Callable[[], None]


class ResizeSource(Protocol):
    def subscribe(self, callback: ResizeCallback) -> Unsubscribe:
        ...


class ManualResizeSource:
    """In-process resize source; the host calls `emit` from its layout hook."""

    def __init__(self) -> None:
        self._subscribers: list[ResizeCallback] = []

    def subscribe(self, callback: ResizeCallback) -> Unsubscribe:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, width: float, height: float) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        for callback in list(self._subscribers):
            callback(float(width), float(height))


class ResizeCoalescer:
    """Keeps only the latest pending size until the next layout pass."""

    def __init__(self) -> None:
        self._pending: tuple[float, float] | None = None
        self._dropped = 0

    def push(self, width: float, height: float) -> None:
        if self._pending is not None:
            self._dropped += 1
        self._pending = (float(width), float(height))

    def take(self) -> tuple[float, float] | None:
        pending = self._pending
        if self._dropped:
            LOGGER.debug("coalesced %d resize notification(s)", self._dropped)
        self._pending = None
        self._dropped = 0
        return pending

    @property
    def has_pending(self) -> bool:
        return self._pending is not None
