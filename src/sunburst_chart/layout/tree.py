"""Sunburst layout: proportional angular split with geometric ring widths."""

import logging
import math
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .colors import ColorAllocator

logger = logging.getLogger(__name__)

FULL_CIRCLE = 360.0

# Diameter of a unit-radius chart
DEFAULT_CHART_SIZE = 2.0


@dataclass
class Angles:
    """Angular span of a sector in degrees, clockwise from 12 o'clock."""

    start: float
    end: float
    abs: float  # end - start


@dataclass
class LayoutNode:
    """Geometry and color computed for one input node."""

    index: int
    data: Mapping[str, Any]
    color: str
    angles: Angles
    offset: float  # inner radius
    width: float  # ring thickness
    depth: int  # 1 for the display root
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    @property
    def outer_radius(self) -> float:
        return self.offset + self.width


@dataclass
class LayoutTree:
    """Arena of layout nodes; the root is at index 0.

    Parent and child links are arena indices, and nodes are appended in
    pre-order (parent before children, siblings left to right).
    """

    nodes: list[LayoutNode] = field(default_factory=list)

    @property
    def root(self) -> LayoutNode:
        return self.nodes[0]

    def node(self, index: int) -> LayoutNode:
        return self.nodes[index]

    def parent_of(self, node: LayoutNode) -> LayoutNode | None:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def children_of(self, node: LayoutNode) -> list[LayoutNode]:
        return [self.nodes[i] for i in node.children]

    def iter_preorder(self) -> Iterator[LayoutNode]:
        return iter(self.nodes)

    def __iter__(self) -> Iterator[LayoutNode]:
        return self.iter_preorder()

    def __len__(self) -> int:
        return len(self.nodes)

    def wrap(self, node: LayoutNode) -> dict[str, Any]:
        """Rebuild the subtree at node as a wrapped input tree.

        The wrapper carries the colors already assigned, so laying it out
        again (e.g. after zooming into node) keeps every node's color.
        Children skipped during layout are not part of the result.

        Args:
            node: Node whose subtree to wrap.

        Returns:
            Nested {"data", "color", "children"} mapping.
        """
        return {
            "data": node.data,
            "color": node.color,
            "children": [self.wrap(child) for child in self.children_of(node)],
        }


def unwrap(node: Mapping[str, Any]) -> tuple[Mapping[str, Any], str | None, Sequence]:
    """Split an input node or wrapper into (data, explicit color, children).

    Args:
        node: Plain input node or {"data": ..., "color": ..., "children": ...} wrapper.

    Returns:
        The source mapping, its explicit color (or None) and its children.

    Raises:
        ValueError: If node is not a mapping.
    """
    if not isinstance(node, Mapping):
        raise ValueError(f"Expected a mapping for a tree node, got {type(node).__name__}")

    data = node.get("data")
    if isinstance(data, Mapping):
        children = node["children"] if "children" in node else data.get("children")
        color = node.get("color") or data.get("color")
    else:
        data = node
        children = node.get("children")
        color = node.get("color")

    return data, color or None, children or []


def node_value(data: Mapping[str, Any]) -> float:
    """Return the weight of an input node.

    Raises:
        ValueError: If the value is missing, not a number, or negative.
    """
    value = data.get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Node value must be a number, got {value!r}")
    if math.isnan(value) or value < 0:
        raise ValueError(f"Node value must be non-negative, got {value!r}")
    return value


def max_depth(node: Mapping[str, Any]) -> int:
    """Number of levels in the tree rooted at node (1 for a leaf)."""
    _, _, children = unwrap(node)
    return 1 + max((max_depth(child) for child in children), default=0)


def root_ring_width(chart_size: float, depth: int, scale: float = 1.0) -> float:
    """Width of the innermost ring so that all rings fit in the chart.

    Each ring is scale times thinner than the one inside it, so the total
    radius is width * sum(1 / scale**i for i < depth).

    Args:
        chart_size: Chart diameter.
        depth: Number of rings.
        scale: Ratio between a ring's width and its child ring's width.

    Returns:
        Width of the root ring.
    """
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")
    x = sum(1 / scale**i for i in range(max(depth, 1)))
    return chart_size / 2 / x


def compute_layout(
    root: Mapping[str, Any],
    scale: float = 1.0,
    chart_size: float = DEFAULT_CHART_SIZE,
    colors: ColorAllocator | None = None,
) -> LayoutTree:
    """Lay out a weighted tree as concentric rings.

    The root covers the full circle; every node shares its span among its
    children in proportion to their values. Children whose value exceeds
    their parent's are logged and skipped.

    Args:
        root: Input node (or wrapper) to display at the center.
        scale: Ratio between consecutive ring widths (1 keeps them uniform).
        chart_size: Chart diameter.
        colors: Allocator for nodes without an explicit color.

    Returns:
        The computed layout tree.
    """
    if colors is None:
        colors = ColorAllocator()

    data, color, children = unwrap(root)
    node_value(data)
    width = root_ring_width(chart_size, max_depth(root), scale)

    tree = LayoutTree()
    root_node = LayoutNode(
        index=0,
        data=data,
        color=color or colors.next(),
        angles=Angles(0.0, FULL_CIRCLE, FULL_CIRCLE),
        offset=0.0,
        width=width,
        depth=1,
    )
    tree.nodes.append(root_node)
    _layout_children(tree, root_node, children, scale, colors)

    logger.debug("Laid out %d nodes (root ring width %.3f)", len(tree), width)
    return tree


def _layout_children(
    tree: LayoutTree,
    parent: LayoutNode,
    children: Sequence,
    scale: float,
    colors: ColorAllocator,
) -> None:
    """Recursively place children within the parent's span."""
    parent_value = node_value(parent.data)

    kept: list[tuple[Mapping[str, Any], str | None, Sequence, float]] = []
    for child in children:
        data, color, grandchildren = unwrap(child)
        value = node_value(data)
        if value > parent_value:
            logger.warning(
                "Child value %s greater than parent value %s, skipping %s",
                value,
                parent_value,
                data.get("name", "unnamed node"),
            )
            continue
        kept.append((data, color, grandchildren, value))

    total = sum(value for *_, value in kept)
    cumulative = 0.0
    start = parent.angles.start

    for i, (data, color, grandchildren, value) in enumerate(kept):
        cumulative += value
        if total == 0:
            end = start
        elif i == len(kept) - 1:
            # Last sibling closes the parent span exactly
            end = parent.angles.end
        else:
            end = parent.angles.start + parent.angles.abs * cumulative / total

        node = LayoutNode(
            index=len(tree.nodes),
            data=data,
            color=color or colors.next(),
            angles=Angles(start, end, end - start),
            offset=parent.offset + parent.width,
            width=parent.width / scale,
            depth=parent.depth + 1,
            parent=parent.index,
        )
        tree.nodes.append(node)
        parent.children.append(node.index)

        _layout_children(tree, node, grandchildren, scale, colors)
        start = end
