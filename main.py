from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from curveview import PlotViewer, ViewerConfig, load_viewer_config, query_axis, scene_to_svg
from curveview.points import normalize_points


# Line-style names used by exported plot files.
_LINE_STYLE_ALIASES = {
    "sharp": "sharp",
    "smooth": "smooth",
    "eckig": "sharp",
    "gerundet": "smooth",
}


def main() -> None:
    parser = argparse.ArgumentParser(prog="curveview")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a points JSON file to SVG.")
    render.add_argument("points_file", type=Path)
    render.add_argument("--width", type=float, default=800.0)
    render.add_argument("--height", type=float, default=500.0)
    render.add_argument("--x-label", default=None)
    render.add_argument("--y-label", default=None)
    render.add_argument("--line-style", choices=sorted(_LINE_STYLE_ALIASES), default=None)
    render.add_argument("--config", type=Path, default=None, help="Viewer config TOML file.")
    render.add_argument("--click-x", type=float, default=None, help="Simulate a click on this X tick.")
    render.add_argument("--click-y", type=float, default=None, help="Simulate a click on this Y tick.")
    render.add_argument("--out", type=Path, default=None, help="Output SVG path. Default: stdout.")

    query = sub.add_parser("query", help="Print where the curve crosses an axis value.")
    query.add_argument("points_file", type=Path)
    query.add_argument("--axis", choices=["x", "y"], required=True)
    query.add_argument("--value", type=float, required=True)
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    document = _load_plot_document(args.points_file)

    if args.command == "render":
        config = load_viewer_config(args.config) if args.config is not None else ViewerConfig()
        try:
            line_style = resolve_line_style(args.line_style or document.get("lineStyle") or "smooth")
        except ValueError as exc:
            parser.error(str(exc))
        viewer = PlotViewer(
            config=config,
            points=document["points"],
            x_label=args.x_label if args.x_label is not None else document.get("xAxisLabel", ""),
            y_label=args.y_label if args.y_label is not None else document.get("yAxisLabel", ""),
            line_style=line_style,  # type: ignore[arg-type]
        )
        viewer.resize(args.width, args.height)
        if args.click_x is not None:
            viewer.click_tick("x", args.click_x)
        if args.click_y is not None:
            viewer.click_tick("y", args.click_y)
        markup = scene_to_svg(viewer.render())
        if args.out is None:
            print(markup)
        else:
            args.out.write_text(markup, encoding="utf-8")
            print(f"wrote {args.out}")
        return

    if args.command == "query":
        result = query_axis(normalize_points(document["points"]), args.axis, args.value, "user-click")
        if result is None:
            print(f"{args.axis}={args.value:g} is outside the plotted range")
            raise SystemExit(1)
        print(
            json.dumps(
                {
                    "axis": result.axis,
                    "queried_value": result.queried_value,
                    "other_axis_value": result.other_axis_value,
                    "intersection": {"x": result.graph_intersection.x, "y": result.graph_intersection.y},
                },
                indent=2,
            )
        )


def resolve_line_style(name: Any) -> str:
    style = _LINE_STYLE_ALIASES.get(str(name).strip().lower())
    if style is None:
        known = ", ".join(sorted(_LINE_STYLE_ALIASES))
        raise ValueError(f"unknown line style {name!r}; expected one of: {known}")
    return style


def _load_plot_document(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"points file not found: {path}")
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        return {"points": raw}
    if isinstance(raw, dict) and isinstance(raw.get("points"), list):
        return raw
    raise ValueError("points file must be a JSON array or an object with a `points` array")


if __name__ == "__main__":
    main()
