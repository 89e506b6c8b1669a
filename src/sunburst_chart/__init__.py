"""Radial partition (sunburst) charts for weighted hierarchies."""

from .chart import ChartOptions, ChartState, SunburstChart
from .graph import load_tree, tree_from_graph

__all__ = [
    "ChartOptions",
    "ChartState",
    "SunburstChart",
    "load_tree",
    "tree_from_graph",
]
