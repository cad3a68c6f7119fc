"""Geometric operations for curvature and corridor calculations.

This module provides the mathematical utilities the engine is built on:
- Vector construction from two points
- Dot and cross products, Euclidean length
- Signed point-to-line distance

All functions are pure and stateless. Divisions follow IEEE float semantics
(see ``ieee_divide``) so degenerate inputs produce NaN or infinities rather
than exceptions.
"""

from strokeline.domain import Point, Vector2, ieee_divide


def vector_between(a: Point, b: Point) -> Vector2:
    """Vector from a to b.

    Examples:
        >>> vector_between(Point(1.0, 1.0), Point(4.0, 5.0))
        Vector2(x=3.0, y=4.0)
    """
    return Vector2.between(a, b)


def dot(u: Vector2, v: Vector2) -> float:
    return u.dot(v)


def cross(u: Vector2, v: Vector2) -> float:
    return u.cross(v)


def length(v: Vector2) -> float:
    """Euclidean length of a vector.

    Examples:
        >>> length(Vector2(3.0, 4.0))
        5.0
    """
    return v.length()


def point_line_distance(p: Point, l0: Point, l1: Point) -> float:
    """Signed perpendicular distance of a point from the line through l0 and l1.

    The distance is positive when p lies to the left of the direction
    l0 -> l1 and negative to the right.

    Precondition: l0 and l1 are distinct. For a zero-length line the result
    is NaN or infinite; callers must not rely on it.

    Args:
        p: The point to measure
        l0: First point on the line
        l1: Second point on the line

    Returns:
        Signed distance from p to the infinite line

    Examples:
        >>> point_line_distance(Point(5.0, 2.0), Point(0.0, 0.0), Point(10.0, 0.0))
        2.0
        >>> point_line_distance(Point(5.0, -2.0), Point(0.0, 0.0), Point(10.0, 0.0))
        -2.0
    """
    direction = vector_between(l0, l1)
    offset = vector_between(l0, p)
    return ieee_divide(cross(direction, offset), length(direction))
