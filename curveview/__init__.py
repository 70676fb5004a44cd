from curveview.config import PaddingSpec, ViewerConfig, load_viewer_config
from curveview.errors import CurveViewError, PointDataError, ViewerConfigError
from curveview.events import InputEvent
from curveview.extent import Extent, compute_extent
from curveview.interpolate import AxisQueryResult, interpolate, query_axis, reference_axis
from curveview.points import Point, normalize_points
from curveview.resize import ManualResizeSource, ResizeSource
from curveview.scene import PlotScene, build_scene
from curveview.svg import SvgTheme, scene_to_svg
from curveview.ticks import Tick, axis_ticks, format_tick, generate_ticks, nice_step
from curveview.viewer import PlotViewer, ViewerState
from curveview.viewport import Viewport, fit_viewport
from curveview.zoom import InitialView, apply_pan, apply_wheel_zoom

__all__ = [
    "AxisQueryResult",
    "CurveViewError",
    "Extent",
    "InitialView",
    "InputEvent",
    "ManualResizeSource",
    "PaddingSpec",
    "PlotScene",
    "PlotViewer",
    "Point",
    "PointDataError",
    "ResizeSource",
    "SvgTheme",
    "Tick",
    "ViewerConfig",
    "ViewerConfigError",
    "ViewerState",
    "Viewport",
    "apply_pan",
    "apply_wheel_zoom",
    "axis_ticks",
    "build_scene",
    "compute_extent",
    "fit_viewport",
    "format_tick",
    "generate_ticks",
    "interpolate",
    "load_viewer_config",
    "nice_step",
    "normalize_points",
    "query_axis",
    "reference_axis",
    "scene_to_svg",
]
