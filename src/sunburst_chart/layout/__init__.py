"""Sunburst layout module: ring geometry, sector outlines and hit testing.

Layout, path construction and hit testing are pure functions of the input
tree; the render module adapts their output to an SVG surface.
"""

from .arcs import PathCommand, describe_arc, format_path
from .colors import DEFAULT_PALETTE, ColorAllocator
from .geometry import Point, PolarPoint, cartesian_to_polar, polar_to_cartesian
from .hit import find_node
from .render import (
    SurfaceNotFoundError,
    SvgContainer,
    SvgDocument,
    SvgSurface,
    write_html,
    write_svg,
)
from .tree import (
    Angles,
    LayoutNode,
    LayoutTree,
    compute_layout,
    max_depth,
    root_ring_width,
)

__all__ = [
    "Point",
    "PolarPoint",
    "polar_to_cartesian",
    "cartesian_to_polar",
    "DEFAULT_PALETTE",
    "ColorAllocator",
    "Angles",
    "LayoutNode",
    "LayoutTree",
    "compute_layout",
    "max_depth",
    "root_ring_width",
    "PathCommand",
    "describe_arc",
    "format_path",
    "find_node",
    "SurfaceNotFoundError",
    "SvgDocument",
    "SvgContainer",
    "SvgSurface",
    "write_svg",
    "write_html",
]
