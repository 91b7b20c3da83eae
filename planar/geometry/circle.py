# planar/geometry/circle.py
import math
from pydantic import Field, field_validator
from planar.geometry.vector import Vector2
from planar.geometry.constants import EPSILON
from utils.base_model import ImmutableModel


class Circle(ImmutableModel):
    """Represents a circle by its centre and radius."""
    p: Vector2 = Field(default_factory=Vector2, description="Centre of the circle")
    r: float = Field(default=0.0, description="Radius of the circle")

    @field_validator("r")
    @classmethod
    def validate_radius(cls, value: float) -> float:
        """Validate that the radius is finite and non-negative."""
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"Radius must be a finite non-negative number, got {value}")
        return value

    @classmethod
    def from_coords(cls, x: float, y: float, r: float) -> "Circle":
        """Create a circle centred at (x, y) with radius r."""
        return cls(p=Vector2(x=x, y=y), r=r)

    def contains_point(self, point: Vector2, tolerance: float = None) -> bool:
        """Check if a point lies on the circumference within the tolerance."""
        if tolerance is None:
            tolerance = EPSILON
        return abs(self.p.distance_to(point) - self.r) <= tolerance

    def __str__(self) -> str:
        return f"Circle({self.p}, r={self.r})"
