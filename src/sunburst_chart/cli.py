"""CLI for sunburst-chart."""

import argparse
import json
import logging
from pathlib import Path

from .chart import ChartOptions, SunburstChart
from .graph import load_tree
from .layout import write_html, write_svg
from .logger import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 500.0


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.

    Raises:
        ValueError: If the top level of the file is not a mapping.
    """
    try:
        import yaml
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err

    with open(config_path) as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level, got {type(config).__name__}")
    return config


def parse_point(text: str) -> tuple[float, float]:
    """Parse an "X,Y" pair of surface coordinates."""
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"expected X,Y coordinates, got {text!r}") from err
    return x, y


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("data", type=Path, help="Input tree (.json, .graphml or .gml)")
    parser.add_argument("--root", help="Root node id for graph input files")
    parser.add_argument("--width", type=float, help=f"Chart width (default: {DEFAULT_SIZE:g})")
    parser.add_argument("--height", type=float, help=f"Chart height (default: {DEFAULT_SIZE:g})")
    parser.add_argument(
        "--scale",
        type=float,
        help="Ratio between consecutive ring widths (default: 1, e.g. 1.62 for golden ratio)",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def resolve_common_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ChartOptions:
    """Merge config file values into args and build chart options."""
    try:
        config = load_config(args.config) if args.config else {}
    except ValueError as err:
        parser.error(str(err))
    args.config_values = config

    for key in ("width", "height", "scale"):
        if getattr(args, key) is None and key in config:
            setattr(args, key, config[key])
    if not args.root and "root" in config:
        args.root = str(config["root"])

    if not args.data.exists():
        parser.error(f"input file not found: {args.data}")

    try:
        return ChartOptions.from_mapping(
            {
                "width": args.width if args.width is not None else DEFAULT_SIZE,
                "height": args.height if args.height is not None else DEFAULT_SIZE,
                "scale": args.scale,
                "surface-id": config.get("surface-id"),
            }
        )
    except (TypeError, ValueError) as err:
        parser.error(str(err))


def build_chart(args: argparse.Namespace, options: ChartOptions) -> SunburstChart:
    """Load the input tree and render it once."""
    data = load_tree(args.data, root=args.root)
    chart = SunburstChart(data, options)
    chart.render()
    return chart


def cmd_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Render the chart to SVG or HTML, applying clicks first."""
    options = resolve_common_args(args, parser)
    if args.output is None and "output" in args.config_values:
        args.output = Path(args.config_values["output"])
    if args.output is None:
        parser.error("--output is required")

    chart = build_chart(args, options)
    for x, y in args.click or []:
        node = chart.find_node_at(x, y)
        chart.surface.click(x, y)
        target = node.data.get("name", node.data.get("value")) if node else None
        logger.debug("Click at (%g, %g) -> %s", x, y, target)
    print(f"Rendered {len(chart.layout)} sectors ({chart.state.value})")

    if args.output.suffix.lower() in (".html", ".htm"):
        write_html(chart.surface, args.output, title=args.data.stem)
    else:
        write_svg(chart.surface, args.output)
    print(f"Wrote {args.output}")


def cmd_layout(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Print the computed layout, one JSON object per node."""
    options = resolve_common_args(args, parser)
    chart = build_chart(args, options)

    for node in chart.layout.iter_preorder():
        record = {
            "name": node.data.get("name"),
            "value": node.data.get("value"),
            "depth": node.depth,
            "color": node.color,
            "start": round(node.angles.start, 6),
            "end": round(node.angles.end, 6),
            "offset": round(node.offset, 6),
            "width": round(node.width, 6),
        }
        print(json.dumps(record))


def main(argv: list[str] | None = None) -> None:
    """Main entry point for sunburst CLI."""
    parser = argparse.ArgumentParser(description="Render weighted trees as sunburst charts")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a chart to SVG or HTML")
    add_common_args(render_parser)
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file; .html/.htm writes a web page, anything else SVG",
    )
    render_parser.add_argument(
        "--click",
        type=parse_point,
        action="append",
        metavar="X,Y",
        help="Click at surface coordinates before writing (can be repeated)",
    )

    layout_parser = subparsers.add_parser("layout", help="Print the computed layout as JSON lines")
    add_common_args(layout_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        # No subcommand provided - show help
        parser.print_help()
        return

    configure_logging(args.verbose)
    if args.command == "render":
        cmd_render(args, render_parser)
    elif args.command == "layout":
        cmd_layout(args, layout_parser)


if __name__ == "__main__":
    main()
