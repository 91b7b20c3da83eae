# planar/geometry/vector.py
import logging
import math
from pydantic import Field, field_validator
from planar.geometry.constants import EPSILON
from planar.geometry.errors import DegenerateInputError
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Vector2(ImmutableModel):
    """
    Represents a 2D point or displacement in Cartesian coordinates.

    Points and directions share this one type. Arithmetic is exposed through
    operators: ``+``, ``-``, scalar ``*`` (either side) and ``/``, ``@`` for the
    dot product and ``^`` for the cross product.

    Equality and ordering are exact and lexicographic (x first, then y). They
    exist for deterministic sorting only; use is_close_to() for geometric
    comparisons.
    """
    x: float = Field(default=0.0, description="X coordinate")
    y: float = Field(default=0.0, description="Y coordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    def __add__(self, other: "Vector2") -> "Vector2":
        """Vector addition."""
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        """Vector subtraction."""
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def __neg__(self) -> "Vector2":
        return self.rotate180()

    def __mul__(self, factor: float) -> "Vector2":
        """Uniform scaling by a scalar."""
        if isinstance(factor, Vector2):
            return NotImplemented
        return self.scale(factor)

    def __rmul__(self, factor: float) -> "Vector2":
        return self.__mul__(factor)

    def __truediv__(self, divisor: float) -> "Vector2":
        """Uniform division by a scalar. A zero divisor raises ZeroDivisionError."""
        if isinstance(divisor, Vector2):
            return NotImplemented
        return Vector2(x=self.x / divisor, y=self.y / divisor)

    def __matmul__(self, other: "Vector2") -> float:
        return self.dot(other)

    def __xor__(self, other: "Vector2") -> float:
        return self.cross(other)

    def __lt__(self, other: "Vector2") -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x < other.x or (self.x == other.x and self.y < other.y)

    def scale(self, factor: float) -> "Vector2":
        """Scale the vector coordinates by a factor."""
        return Vector2(x=self.x * factor, y=self.y * factor)

    def dot(self, other: "Vector2") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """
        Z component of the cross product.

        Positive when `other` lies counter-clockwise from this vector.
        """
        return self.x * other.y - self.y * other.x

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm2())

    def distance2_to(self, other: "Vector2") -> float:
        """Squared Euclidean distance to another point."""
        return (self - other).norm2()

    def distance_to(self, other: "Vector2") -> float:
        """Euclidean distance to another point."""
        return (self - other).norm()

    def rotate90(self) -> "Vector2":
        """Rotate by 90 degrees clockwise: (x, y) -> (y, -x)."""
        return Vector2(x=self.y, y=-self.x)

    def rotate180(self) -> "Vector2":
        """Rotate by 180 degrees: (x, y) -> (-x, -y)."""
        return Vector2(x=-self.x, y=-self.y)

    def rotate270(self) -> "Vector2":
        """Rotate by 270 degrees clockwise: (x, y) -> (-y, x)."""
        return Vector2(x=-self.y, y=self.x)

    def normalise(self) -> "Vector2":
        """
        Unit vector with the same direction.

        Raises:
            DegenerateInputError: If this is the zero vector
        """
        # hypot keeps tiny nonzero vectors from underflowing to zero length
        length = math.hypot(self.x, self.y)
        if length == 0.0:
            logger.warning("Cannot normalise the zero vector")
            raise DegenerateInputError("Cannot normalise a zero-length vector")
        return self / length

    def is_close_to(self, other: "Vector2", tolerance: float = None) -> bool:
        """
        Check if this point is close to another point within the specified tolerance.

        Args:
            other: The point to compare with
            tolerance: Maximum distance between points to be considered equal.
                      If None, uses the default EPSILON value.

        Returns:
            True if points are within the tolerance distance of each other
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) <= tolerance

    def midpoint(self, other: "Vector2") -> "Vector2":
        """Calculate the midpoint between this point and another point."""
        return (self + other) / 2.0

    def format_as_tuple(self) -> str:
        """Format the vector as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()
