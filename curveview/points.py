from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from typing import Any

import numpy as np

from curveview.errors import PointDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def coord(self, axis: str) -> float:
        return self.x if axis == "x" else self.y


def normalize_points(values: Any) -> tuple[Point, ...]:
    """Coerce host-supplied point data into a tuple of finite `Point`s.

    Entries without numeric x/y are skipped; non-finite coordinates are
    dropped with a warning. The input container is never modified.
    """

    if values is None:
        return ()
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _from_array(tensor.to(torch.float64).numpy())
    if pd is not None and isinstance(values, pd.DataFrame):
        if "x" not in values.columns or "y" not in values.columns:
            raise PointDataError("DataFrame input requires `x` and `y` columns")
        return _from_pairs(zip(values["x"].tolist(), values["y"].tolist(), strict=True))
    if isinstance(values, np.ndarray):
        return _from_array(values)
    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return _from_pairs(_entry_pair(entry) for entry in values)
    raise PointDataError(f"unsupported points input type: {type(values)!r}")


def points_as_array(points: Sequence[Point]) -> np.ndarray:
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray([(p.x, p.y) for p in points], dtype=np.float64)


def _from_array(arr: np.ndarray) -> tuple[Point, ...]:
    if arr.size == 0:
        return ()
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise PointDataError(f"point array must have shape (N, 2), got {arr.shape}")
    if arr.dtype.kind not in {"i", "u", "f"}:
        return _from_pairs((row[0], row[1]) for row in arr.tolist())
    data = arr.astype(np.float64, copy=False)
    mask = np.all(np.isfinite(data), axis=1)
    dropped = int(mask.size - np.count_nonzero(mask))
    if dropped:
        LOGGER.warning("dropped %d point(s) with non-finite coordinates", dropped)
    return tuple(Point(float(x), float(y)) for x, y in data[mask].tolist())


def _from_pairs(pairs: Any) -> tuple[Point, ...]:
    out: list[Point] = []
    skipped = 0
    non_finite = 0
    for pair in pairs:
        if pair is None:
            skipped += 1
            continue
        x = _coerce_number(pair[0])
        y = _coerce_number(pair[1])
        if x is None or y is None:
            skipped += 1
            continue
        if not (math.isfinite(x) and math.isfinite(y)):
            non_finite += 1
            continue
        out.append(Point(x, y))
    if skipped:
        LOGGER.warning("skipped %d point entries without numeric x/y", skipped)
    if non_finite:
        LOGGER.warning("dropped %d point(s) with non-finite coordinates", non_finite)
    return tuple(out)


def _entry_pair(entry: Any) -> tuple[Any, Any] | None:
    if isinstance(entry, Point):
        return (entry.x, entry.y)
    if isinstance(entry, Mapping):
        if "x" not in entry or "y" not in entry:
            return None
        return (entry["x"], entry["y"])
    if isinstance(entry, Sequence) and not isinstance(entry, (str, bytes, bytearray)) and len(entry) == 2:
        return (entry[0], entry[1])
    return None


def _coerce_number(raw: Any) -> float | None:
    # Strings and booleans are not coordinates even though float() accepts them.
    if isinstance(raw, (bool, np.bool_)):
        return None
    if isinstance(raw, Decimal):
        return float(raw)
    if isinstance(raw, (int, float, np.integer, np.floating)):
        return float(raw)
    return None
