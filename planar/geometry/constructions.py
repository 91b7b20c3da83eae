# planar/geometry/constructions.py
"""Constructions derived from the vector, line and circle primitives."""
import logging
from planar.geometry.vector import Vector2
from planar.geometry.line import Line
from planar.geometry.circle import Circle
from planar.geometry.constants import EPSILON
from planar.geometry.errors import DegenerateInputError

logger = logging.getLogger(__name__)


def equidistant_line(p1: Vector2, p2: Vector2) -> Line:
    """
    Perpendicular bisector of the segment p1-p2.

    The returned line passes through the midpoint and runs along the
    segment direction rotated 90° clockwise.

    Raises:
        DegenerateInputError: If p1 and p2 are the same point
    """
    if p1 == p2:
        logger.warning(f"Cannot bisect a zero-length segment at {p1}")
        raise DegenerateInputError(f"Points coincide at {p1}; bisector is undefined")

    o = (p1 + p2) / 2.0
    return Line(p1=o, p2=o + (p2 - p1).rotate90())


def equiangle_circle(cc1: Circle, cc2: Circle) -> Circle:
    """
    Circle through the internal and external similitude points of two circles.

    Every point of the result sees both circles under the same angle (the
    circle of Apollonius for the ratio of the radii). Its centre lies on the
    line through both centres.

    Args:
        cc1: First circle
        cc2: Second circle, must differ in radius from the first

    Returns:
        The circle having the segment between both similitude points as diameter

    Raises:
        DegenerateInputError: If the centres coincide or the radii are equal
    """
    # c1 is the smaller circle; on a tie the first argument stays c1
    c1, c2 = (cc2, cc1) if cc2.r < cc1.r else (cc1, cc2)

    if c1.p.distance2_to(c2.p) <= EPSILON:
        logger.warning(f"{c1} and {c2} are concentric")
        raise DegenerateInputError("Circle centres coincide; similitude points are undefined")
    if abs(c2.r - c1.r) <= EPSILON:
        logger.warning(f"{c1} and {c2} have equal radii")
        raise DegenerateInputError("Equal radii have no external similitude point")

    dist = (c2.p - c1.p).norm()
    vec = (c2.p - c1.p) / dist

    # distances from c1 to the internal and external similitude points
    din = c1.r * dist / (c2.r + c1.r)
    dout = c1.r * dist / (c2.r - c1.r)

    r = (din + dout) / 2.0
    return Circle(p=c1.p - vec * (r - din), r=r)
