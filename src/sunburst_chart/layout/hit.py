"""Resolve a polar point to the layout node drawn under it."""

import math

from .geometry import PolarPoint
from .tree import FULL_CIRCLE, LayoutNode, LayoutTree


def _in_sector(angle: float, node: LayoutNode) -> bool:
    # start is exclusive and end inclusive; the 0/360 seam belongs to the
    # sector ending at 360
    if angle == 0:
        angle = FULL_CIRCLE
    return node.angles.start < angle <= node.angles.end


def _find(point: PolarPoint, tree: LayoutTree, node: LayoutNode) -> LayoutNode | None:
    if point.dist <= node.offset:
        return None

    if point.dist <= node.offset + node.width:
        return node if _in_sector(point.angle, node) else None

    for child in tree.children_of(node):
        found = _find(point, tree, child)
        if found is not None:
            return found
    return None


def find_node(point: PolarPoint, tree: LayoutTree) -> LayoutNode | None:
    """Find the node whose sector contains point.

    Descends from the root: a point beyond a node's ring is searched for in
    its children, a point inside the ring matches when its angle is within
    the node's span. Sibling spans tile their parent's span, so only the
    root is a valid starting point.

    Args:
        point: Distance and angle relative to the chart center.
        tree: Computed layout.

    Returns:
        The matching node, or None when the point is outside every sector
        (including the undefined-angle center point).
    """
    if math.isnan(point.angle):
        return None
    return _find(point, tree, tree.root)
