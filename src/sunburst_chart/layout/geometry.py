"""Polar/cartesian conversion with angles measured clockwise from 12 o'clock."""

import math
from typing import NamedTuple


class Point(NamedTuple):
    """Cartesian point in surface coordinates (y grows downwards)."""

    x: float
    y: float


class PolarPoint(NamedTuple):
    """Polar point: distance from origin and angle in degrees, [0, 360)."""

    dist: float
    angle: float


def polar_to_cartesian(
    center_x: float,
    center_y: float,
    radius: float,
    angle_degrees: float,
) -> Point:
    """Convert a polar position around (center_x, center_y) to cartesian.

    Args:
        center_x: X coordinate of the origin.
        center_y: Y coordinate of the origin.
        radius: Distance from the origin.
        angle_degrees: Angle in degrees, clockwise from 12 o'clock.

    Returns:
        The cartesian point.
    """
    angle_in_radians = (angle_degrees - 90) * math.pi / 180.0
    return Point(
        center_x + radius * math.cos(angle_in_radians),
        center_y + radius * math.sin(angle_in_radians),
    )


def cartesian_to_polar(point: Point, origin: Point) -> PolarPoint:
    """Convert a cartesian point to polar coordinates around origin.

    Uses the same clockwise-from-top convention as polar_to_cartesian.
    At the origin itself the angle is undefined and returned as NaN; such a
    point never falls inside any sector.

    Args:
        point: Point to convert.
        origin: Origin of the polar system.

    Returns:
        PolarPoint with distance and angle in [0, 360).
    """
    dx = point[0] - origin[0]
    dy = point[1] - origin[1]
    distance = math.sqrt(dx * dx + dy * dy)
    if distance == 0:
        return PolarPoint(0.0, math.nan)

    # Clamp against rounding just outside acos' domain
    angle = math.acos(max(-1.0, min(1.0, dx / distance)))
    if dy < 0:
        angle = 2 * math.pi - angle

    angle = math.degrees(angle + math.pi / 2) % 360
    return PolarPoint(distance, angle)
