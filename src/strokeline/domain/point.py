"""Core geometric types for stroke representation.

This module defines the fundamental geometric types used throughout strokeline:
- Point: A 2D stroke location
- Vector2: A 2D displacement with the vector algebra the curvature math needs
- Sample: One timestamped input event
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A location on a stroke.

    Immutable and hashable for use in sets/dicts.

    The invalid sentinel has both coordinates set to NaN. A point with only
    one NaN coordinate is not the sentinel.

    Attributes:
        x: X coordinate in input units
        y: Y coordinate in input units
    """

    x: float
    y: float

    @classmethod
    def invalid(cls) -> "Point":
        """Create the invalid sentinel point.

        Returns:
            Point with both coordinates NaN
        """
        return cls(math.nan, math.nan)

    def is_invalid(self) -> bool:
        """Check whether this is the invalid sentinel.

        Returns:
            True if both coordinates are NaN
        """
        return math.isnan(self.x) and math.isnan(self.y)

    def __sub__(self, other: "Point") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Vector2:
    """A 2D displacement.

    Scalar division follows IEEE float semantics: dividing by zero yields a
    signed infinity or NaN instead of raising, so degenerate derivatives
    propagate through the curvature math as values.

    Attributes:
        x: X component
        y: Y component
    """

    x: float
    y: float

    @classmethod
    def between(cls, a: Point, b: Point) -> "Vector2":
        """Vector pointing from a to b (``b - a``)."""
        return cls(b.x - a.x, b.y - a.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(ieee_divide(self.x, scalar), ieee_divide(self.y, scalar))

    def dot(self, other: "Vector2") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Z component of the 3D cross product of the two planar vectors."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics instead of raising ZeroDivisionError.

    Args:
        numerator: Dividend
        denominator: Divisor, may be (signed) zero

    Returns:
        The quotient; for a zero divisor, NaN when the dividend is zero or
        NaN, otherwise an infinity whose sign combines both operand signs
        (so ``1 / -0.0`` is ``-inf``)

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True, slots=True)
class Sample:
    """One raw input event.

    Timestamps are non-decreasing across a stroke. They travel with the
    point into the simplified trace but play no part in the curvature math,
    which is purely spatial.

    Attributes:
        point: Stroke location
        timestamp: Event time in device ticks
    """

    point: Point
    timestamp: int = 0

    @classmethod
    def at(cls, x: float, y: float, timestamp: int = 0) -> "Sample":
        """Build a sample from raw coordinates."""
        return cls(Point(x, y), timestamp)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y and timestamp fields
        """
        return {"x": self.point.x, "y": self.point.y, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Sample":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and timestamp fields

        Returns:
            Sample instance
        """
        return cls(point=Point.from_dict(data), timestamp=int(data.get("timestamp", 0)))
