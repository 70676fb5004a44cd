from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
import tomllib
from typing import Any

from curveview.errors import ViewerConfigError


@dataclass(frozen=True)
class PaddingSpec:
    left: float
    right: float
    top: float
    bottom: float

    def __post_init__(self) -> None:
        for name in ("left", "right", "top", "bottom"):
            if getattr(self, name) < 0:
                raise ValueError(f"padding.{name} must be >= 0")


@dataclass(frozen=True)
class ViewerConfig:
    """Tunables for one plot viewer instance.

    Defaults reproduce the stock viewer: 50/20/20/50 padding on regular
    layouts, five ticks per axis, a 0.001 per wheel-unit zoom rate and a
    pH-7 reference indicator.
    """

    padding: PaddingSpec = PaddingSpec(left=50.0, right=20.0, top=20.0, bottom=50.0)
    compact_padding: PaddingSpec = PaddingSpec(left=40.0, right=12.0, top=12.0, bottom=40.0)
    narrow_breakpoint_px: float = 640.0
    tick_count: int = 5
    compact_tick_count: int = 3
    zoom_sensitivity: float = 0.1
    zoom_delta_scale: float = 0.01
    min_zoom_ratio: float = 0.5
    max_zoom_ratio: float = 20.0
    reference_value: float = 7.0
    reference_keyword: str = "ph"
    marker_radius: float = 4.0
    hovered_marker_radius: float = 6.0
    tooltip_offset_px: float = 20.0
    empty_message: str = "Upload a file or import JSON data to display points"

    def __post_init__(self) -> None:
        if self.narrow_breakpoint_px < 0:
            raise ValueError("narrow_breakpoint_px must be >= 0")
        if self.tick_count <= 0 or self.compact_tick_count <= 0:
            raise ValueError("tick counts must be > 0")
        if self.zoom_sensitivity <= 0 or self.zoom_delta_scale <= 0:
            raise ValueError("zoom sensitivity must be > 0")
        if self.min_zoom_ratio <= 0:
            raise ValueError("min_zoom_ratio must be > 0")
        if self.max_zoom_ratio < self.min_zoom_ratio:
            raise ValueError("max_zoom_ratio must be >= min_zoom_ratio")
        if not self.reference_keyword:
            raise ValueError("reference_keyword must be a non-empty string")
        if self.marker_radius <= 0 or self.hovered_marker_radius <= 0:
            raise ValueError("marker radii must be > 0")

    def is_narrow(self, width: float) -> bool:
        return width < self.narrow_breakpoint_px

    def padding_for_width(self, width: float) -> PaddingSpec:
        return self.compact_padding if self.is_narrow(width) else self.padding

    def tick_count_for_width(self, width: float) -> int:
        return self.compact_tick_count if self.is_narrow(width) else self.tick_count


_PADDING_KEYS = {"padding", "compact_padding"}


def load_viewer_config(path: str | Path) -> ViewerConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"viewer config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ViewerConfigError(f"invalid viewer config {config_path}: {exc}") from exc
    return viewer_config_from_mapping(raw)


def viewer_config_from_mapping(raw: dict[str, Any]) -> ViewerConfig:
    known = {f.name for f in fields(ViewerConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ViewerConfigError(f"unknown viewer config keys: {', '.join(unknown)}")
    kwargs: dict[str, Any] = {}
    for key, value in raw.items():
        if key in _PADDING_KEYS:
            kwargs[key] = _coerce_padding(value, key)
        else:
            kwargs[key] = value
    try:
        return ViewerConfig(**kwargs)
    except (TypeError, ValueError) as exc:
        raise ViewerConfigError(str(exc)) from exc


def _coerce_padding(value: Any, key: str) -> PaddingSpec:
    if not isinstance(value, dict):
        raise ViewerConfigError(f"{key} must be a table")
    try:
        return PaddingSpec(
            left=float(value["left"]),
            right=float(value["right"]),
            top=float(value["top"]),
            bottom=float(value["bottom"]),
        )
    except KeyError as exc:
        raise ViewerConfigError(f"{key} missing required field: {exc.args[0]}") from exc
