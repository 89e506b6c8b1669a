"""SVG path outlines for sunburst sectors."""

from dataclasses import dataclass

from .geometry import Point, polar_to_cartesian
from .tree import FULL_CIRCLE, LayoutNode

# A full-circle arc command degenerates (start == end), so it stops short
FULL_CIRCLE_END = 359.0


@dataclass(frozen=True)
class PathCommand:
    """One SVG path command, e.g. PathCommand("L", (x, y))."""

    op: str
    args: tuple[float, ...] = ()


def _arc(radius: float, large_arc: int, sweep: int, to: Point) -> PathCommand:
    return PathCommand("A", (radius, radius, 0, large_arc, sweep, to.x, to.y))


def describe_arc(node: LayoutNode, origin: Point) -> list[PathCommand]:
    """Build the closed outline of a node's sector.

    The outer arc runs backwards from the end angle to the start angle and
    the inner arc forwards again, so every outline is wound the same way.
    A sector covering the full circle is drawn as a disc, or as a ring with
    an oppositely wound hole when its inner radius is positive.

    Args:
        node: Laid out node.
        origin: Chart center.

    Returns:
        Path commands in drawing order.
    """
    start = node.angles.start
    end = node.angles.end
    full_circle = end - start == FULL_CIRCLE
    if full_circle:
        end = FULL_CIRCLE_END

    inner = node.offset
    outer = node.offset + node.width
    large_arc = 1 if end - start > 180 else 0
    cx, cy = origin

    outer_end = polar_to_cartesian(cx, cy, outer, end)
    outer_start = polar_to_cartesian(cx, cy, outer, start)

    if full_circle:
        commands = [
            PathCommand("M", outer_end),
            _arc(outer, large_arc, 0, outer_start),
            PathCommand("Z"),
        ]
        if inner > 0:
            commands += [
                PathCommand("M", polar_to_cartesian(cx, cy, inner, start)),
                _arc(inner, large_arc, 1, polar_to_cartesian(cx, cy, inner, end)),
                PathCommand("Z"),
            ]
        return commands

    inner_start = polar_to_cartesian(cx, cy, inner, start)
    inner_end = polar_to_cartesian(cx, cy, inner, end)
    return [
        PathCommand("M", outer_end),
        _arc(outer, large_arc, 0, outer_start),
        PathCommand("L", inner_start),
        _arc(inner, large_arc, 1, inner_end),
        PathCommand("Z"),
    ]


def _format_number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_path(commands: list[PathCommand]) -> str:
    """Serialize path commands into an SVG ``d`` attribute."""
    parts: list[str] = []
    for command in commands:
        parts.append(command.op)
        parts.extend(_format_number(arg) for arg in command.args)
    return " ".join(parts)
