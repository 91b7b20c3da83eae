# planar/geometry/intersection.py
"""
Intersections between lines and circles.

Every function returns a list of zero, one or two points. An empty list means
the shapes do not meet, or that the configuration is degenerate (parallel or
coincident lines, concentric circles). Boundary cases are classified with
EPSILON, tangency being checked before the strict inequalities.

Two-point results have a fixed order callers may rely on:
- circle/circle: the point offset by the clockwise normal of the centre line first
- circle/line: the point along the line direction (p1 -> p2) first
"""
import logging
import math
from typing import List, Union
from planar.geometry.vector import Vector2
from planar.geometry.line import Line
from planar.geometry.circle import Circle
from planar.geometry.constants import EPSILON

logger = logging.getLogger(__name__)

Shape = Union[Line, Circle]


def intersect_lines(l1: Line, l2: Line) -> List[Vector2]:
    """
    Intersect two infinite lines.

    Parallel and coincident lines both give an empty result.
    """
    a1, b1, c1 = l1.to_abc()
    a2, b2, c2 = l2.to_abc()

    det = a1 * b2 - a2 * b1

    if abs(det) <= EPSILON:
        logger.debug(f"{l1} and {l2} are parallel or coincident")
        return []

    logger.debug(f"{l1} and {l2} cross")
    return [Vector2(x=c2 * b1 - c1 * b2, y=a2 * c1 - a1 * c2) / det]


def intersect_circles(c1: Circle, c2: Circle) -> List[Vector2]:
    """
    Intersect two circles.

    Args:
        c1: First circle
        c2: Second circle

    Returns:
        No points for concentric, separate or nested circles, the tangency
        point for touching circles, otherwise both crossing points
    """
    dist2 = c1.p.distance2_to(c2.p)
    if dist2 <= EPSILON:
        logger.debug(f"{c1} and {c2} are concentric")
        return []

    # touching outside
    rsum = c1.r + c2.r
    rsum2 = rsum * rsum

    if abs(dist2 - rsum2) <= EPSILON:
        logger.debug(f"{c1} and {c2} touch outside")
        return [(c1.p * c2.r + c2.p * c1.r) / rsum]
    if dist2 > rsum2:
        logger.debug(f"{c1} and {c2} are separate")
        return []

    # touching inside
    rdiff = c1.r - c2.r
    rdiff2 = rdiff * rdiff

    if abs(dist2 - rdiff2) <= EPSILON:
        logger.debug(f"{c1} and {c2} touch inside")
        return [c1.p + (c2.p - c1.p) * c1.r / rdiff]
    if dist2 < rdiff2:
        logger.debug(f"One of {c1} and {c2} lies inside the other")
        return []

    dist = math.sqrt(dist2)

    # Law of cosines for the angle at c1 between the centre line and a crossing point
    cosa = (c1.r * c1.r + dist2 - c2.r * c2.r) / 2 / c1.r / dist
    sina = math.sqrt(max(0.0, 1 - cosa * cosa))

    vec = (c2.p - c1.p) / dist
    o = c1.p + vec * c1.r * cosa
    logger.debug(f"{c1} and {c2} cross")

    return [
        o + vec.rotate90() * sina * c1.r,
        o + vec.rotate270() * sina * c1.r,
    ]


def intersect_circle_line(c: Circle, l: Line) -> List[Vector2]:
    """Intersect a circle with an infinite line."""
    vec = l.unit_direction_vector
    o = l.project_point(c.p)

    dist2 = o.distance2_to(c.p)
    r2 = c.r * c.r

    if abs(dist2 - r2) <= EPSILON:
        logger.debug(f"{l} touches {c}")
        return [o]
    if dist2 > r2:
        logger.debug(f"{l} misses {c}")
        return []

    length = math.sqrt(r2 - dist2)
    logger.debug(f"{l} crosses {c}")

    return [
        o + vec * length,
        o + vec.rotate180() * length,
    ]


def intersect_line_circle(l: Line, c: Circle) -> List[Vector2]:
    """Same as intersect_circle_line with the arguments swapped."""
    return intersect_circle_line(c, l)


def intersection(first: Shape, second: Shape) -> List[Vector2]:
    """
    Intersect any two supported shapes.

    Raises:
        TypeError: If either argument is neither a Line nor a Circle
    """
    if isinstance(first, Line) and isinstance(second, Line):
        return intersect_lines(first, second)
    if isinstance(first, Circle) and isinstance(second, Circle):
        return intersect_circles(first, second)
    if isinstance(first, Circle) and isinstance(second, Line):
        return intersect_circle_line(first, second)
    if isinstance(first, Line) and isinstance(second, Circle):
        return intersect_line_circle(first, second)
    raise TypeError(
        f"Cannot intersect {type(first).__name__} with {type(second).__name__}"
    )
