"""
Geometry primitives - Point, polar conversion and SVG path segments.

Angle convention (used everywhere in the package):
0 degrees points at (center.x + radius, center.y) and angles grow
clockwise, since y grows downward in drawing space.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Point:
    """A planar coordinate."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def format_number(value: Real) -> str:
    """
    Format a coordinate for a path string.

    Rounded to 6 decimals with trailing zeros stripped, so that the same
    inputs always produce byte-identical paths.
    """
    rounded = round(float(value), 6)
    if rounded == 0:
        rounded = 0.0  # no "-0"
    text = f"{rounded:.6f}".rstrip("0").rstrip(".")
    return text


def polar_to_cartesian(center: Point, radius: float, angle_degrees: Real) -> Point:
    """
    Convert polar coordinates (center, radius, angle) to a Cartesian point.

    Examples:
        polar_to_cartesian(Point(0, 0), 100, 0) = Point(100, 0)
        polar_to_cartesian(Point(0, 0), 100, 90) = Point(0, 100)  (below center)
    """
    a = math.radians(angle_degrees)
    return Point(
        x=center.x + radius * math.cos(a),
        y=center.y + radius * math.sin(a),
    )


def describe_arc(center: Point, radius: float, start_degrees: Real, end_degrees: Real) -> str:
    """
    Describe the arc between two angles as an SVG path segment.

    The segment moves to the point at `end_degrees` and sweeps back to
    the point at `start_degrees`. A sweep of 360 degrees or more is not
    supported; build full rings from several arcs instead.

    Args:
        center: Circle center
        radius: Circle radius
        start_degrees: Start angle
        end_degrees: End angle

    Returns:
        Path segment like "M x y A r r 0 0 0 x y"
    """
    large_arc_flag = "0" if end_degrees - start_degrees <= 180 else "1"
    start = polar_to_cartesian(center, radius, end_degrees)
    end = polar_to_cartesian(center, radius, start_degrees)
    r = format_number(radius)
    return (
        f"M {format_number(start.x)} {format_number(start.y)} "
        f"A {r} {r} 0 {large_arc_flag} 0 {format_number(end.x)} {format_number(end.y)}"
    )


def line_to(point: Point) -> str:
    """Describe a straight line from the current position to `point`."""
    return f"L {format_number(point.x)} {format_number(point.y)}"


def wedge_path(center: Point, radius: float, arc_degrees: Real) -> str:
    """
    Closed pie-slice outline centered on the 0 degree direction.

    The arc runs from -arc/2 to +arc/2, then a line goes back to the
    center and another closes the outline at the arc's start point.
    A single wedge covering the whole circle (one division) is drawn as
    two half-disc arcs.
    """
    if arc_degrees >= 360:
        return " ".join(
            [
                describe_arc(center, radius, -180, 0),
                describe_arc(center, radius, 0, 180),
            ]
        )

    half_arc = arc_degrees / 2
    arc_start = polar_to_cartesian(center, radius, half_arc)
    return " ".join(
        [
            describe_arc(center, radius, -half_arc, half_arc),
            line_to(center),
            line_to(arc_start),
        ]
    )
