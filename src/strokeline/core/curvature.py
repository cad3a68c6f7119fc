"""Instantaneous curvature from a five-point neighborhood.

The estimator works on central finite differences over the points
``i-2 .. i+2``:

    v = ((p[i+1] - p[i-1]) / 2)                     first derivative
    a = ((2 * p[i] - p[i-2] - p[i+2]) / 4)          second derivative
    k = |(a * (v.v) - v * (a.v)) / (v.v)^2|

which is the magnitude of the normal component of the acceleration scaled by
the squared speed, i.e. the planar curvature |x'y'' - y'x''| / |v|^3.

The magnitude is then signed by ``sign(dx / dy)``. This convention is what the
classifier's sign change detection is calibrated against, including its
degenerate cases: ``dy == 0`` gives a signed infinity (or NaN for ``dx == 0``
as well), and ``sign`` maps zero and NaN to -1.

See https://ocw.mit.edu/ans7870/18/18.013a/textbook/HTML/chapter15/section04.html
"""

from dataclasses import dataclass

from strokeline.core.buffer import PointBuffer
from strokeline.domain import Point, Vector2, ieee_divide

# Points needed on each side of an index to estimate its curvature
NEIGHBORHOOD_RADIUS = 2


def sign(value: float) -> int:
    """Sign used for curvature comparisons: 1 if strictly positive, else -1.

    Examples:
        >>> sign(0.5), sign(0.0), sign(-0.0), sign(float("nan"))
        (1, -1, -1, -1)
    """
    return 1 if value > 0.0 else -1


@dataclass(frozen=True, slots=True)
class CurvatureEstimate:
    """Derivatives and signed curvature at one point.

    Attributes:
        first_derivative: Central first difference (dx, dy)
        second_derivative: Central second difference (d2x, d2y)
        curvature: Signed i-curvature
    """

    first_derivative: Vector2
    second_derivative: Vector2
    curvature: float


def i_curvature(p0: Point, p1: Point, p2: Point, p3: Point, p4: Point) -> CurvatureEstimate:
    """Estimate the curvature at p2 from its two neighbors on each side.

    Args:
        p0: Point at i-2
        p1: Point at i-1
        p2: Point at i
        p3: Point at i+1
        p4: Point at i+2

    Returns:
        CurvatureEstimate with derivatives and signed curvature

    Examples:
        >>> straight = [Point(float(i), float(i)) for i in range(5)]
        >>> i_curvature(*straight).curvature
        0.0
    """
    dx = (p3.x - p1.x) / 2.0
    dy = (p3.y - p1.y) / 2.0
    d2x = (2.0 * p2.x - p0.x - p4.x) / 4.0
    d2y = (2.0 * p2.y - p0.y - p4.y) / 4.0

    v = Vector2(dx, dy)
    a = Vector2(d2x, d2y)
    v2 = v.dot(v)
    k = ((a * v2 - v * a.dot(v)) / (v2 * v2)).length()

    return CurvatureEstimate(
        first_derivative=v,
        second_derivative=a,
        curvature=k * sign(ieee_divide(dx, dy)),
    )


def has_neighborhood(buffer: PointBuffer, index: int) -> bool:
    """Whether the buffer holds the full five-point neighborhood of an index."""
    return (
        buffer.points_before(index) >= NEIGHBORHOOD_RADIUS
        and buffer.points_after(index) >= NEIGHBORHOOD_RADIUS
    )


def estimate_curvature(buffer: PointBuffer, index: int) -> CurvatureEstimate:
    """Estimate the curvature at a buffered index.

    Args:
        buffer: Stroke samples
        index: Point index; ``index-2 .. index+2`` must be buffered

    Returns:
        CurvatureEstimate at the index

    Raises:
        IndexError: If the neighborhood is not fully buffered
    """
    neighborhood = [
        buffer.fetch_point(i)
        for i in range(index - NEIGHBORHOOD_RADIUS, index + NEIGHBORHOOD_RADIUS + 1)
    ]
    return i_curvature(*neighborhood)
