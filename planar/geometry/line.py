# planar/geometry/line.py
from typing import Tuple, Union
from pydantic import Field, model_validator
from planar.geometry.vector import Vector2
from planar.geometry.constants import EPSILON
from utils.base_model import ImmutableModel


class Line(ImmutableModel):
    """
    Represents an infinite line through two distinct points.

    The direction of the line runs from p1 to p2; tangent and intersection
    point ordering depends on it.
    """
    p1: Vector2 = Field(description="First point on the line")
    p2: Vector2 = Field(description="Second point on the line")

    @model_validator(mode="after")
    def validate_distinct_points(self):
        """Validate that the defining points differ."""
        if self.p1 == self.p2:
            raise ValueError("Line cannot have zero length (p1 and p2 are the same point)")
        return self

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "Line":
        """Create a line through (x1, y1) and (x2, y2)."""
        return cls(p1=Vector2(x=x1, y=y1), p2=Vector2(x=x2, y=y2))

    @property
    def length(self) -> float:
        """Distance between the defining points."""
        return self.p1.distance_to(self.p2)

    @property
    def midpoint(self) -> Vector2:
        """Midpoint of the defining points."""
        return self.p1.midpoint(self.p2)

    @property
    def direction_vector(self) -> Vector2:
        """Get the direction vector from p1 to p2."""
        return self.p2 - self.p1

    @property
    def unit_direction_vector(self) -> Vector2:
        """Get the unit direction vector (normalized direction vector)."""
        return self.direction_vector.normalise()

    @property
    def normal_vector(self) -> Vector2:
        """Get the normal vector (direction rotated 90° counterclockwise)."""
        return self.direction_vector.rotate270()

    def to_abc(self) -> Tuple[float, float, float]:
        """
        Convert to implicit form A * x + B * y + C = 0.

        The coefficients are not normalised; (A, B) has the length of the
        defining segment.
        """
        a = self.p1.y - self.p2.y
        b = self.p2.x - self.p1.x
        c = self.p1 ^ self.p2
        return a, b, c

    def distance_to_point(self, point: Vector2) -> float:
        """Calculate the perpendicular distance from a point to the line."""
        return abs(self.unit_direction_vector ^ (point - self.p1))

    def project_point(self, point: Vector2) -> Vector2:
        """
        Find the foot of the perpendicular dropped from a point onto the line.

        Args:
            point: The point to project

        Returns:
            The closest point on the (infinite) line
        """
        direction = self.unit_direction_vector
        return self.p1 + direction * direction.dot(point - self.p1)

    def contains_point(self, point: Vector2, tolerance: float = None) -> bool:
        """
        Check if a point lies on the line.

        Args:
            point: The point to check
            tolerance: Distance tolerance for considering the point to be on the line

        Returns:
            True if the point is on the line within the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to_point(point) <= tolerance

    def __str__(self) -> str:
        """String representation of the line."""
        return f"Line({self.p1} -> {self.p2})"


def distance(a: Union[Vector2, Line], b: Union[Vector2, Line]) -> float:
    """
    Distance between two points, or between a point and a line in either order.

    Raises:
        TypeError: For any other combination of arguments
    """
    if isinstance(a, Vector2) and isinstance(b, Vector2):
        return a.distance_to(b)
    if isinstance(a, Vector2) and isinstance(b, Line):
        return b.distance_to_point(a)
    if isinstance(a, Line) and isinstance(b, Vector2):
        return a.distance_to_point(b)
    raise TypeError(f"Cannot measure distance between {type(a).__name__} and {type(b).__name__}")
