"""Online corridor simplification of a classified stroke.

The simplifier keeps one open segment at a time. The segment's tangent line
runs through its first point and the next distinct point after it. Normal
points that stay within the tolerance corridor around that line are dropped;
the first one outside it, or any critical point, closes the segment with a
breakpoint and opens the next one there.

Emitted breakpoints are never revisited, so the simplified polyline can be
streamed to a consumer as it grows.
"""

from dataclasses import dataclass

from strokeline.core.buffer import PointBuffer
from strokeline.core.geometry import point_line_distance
from strokeline.domain import Breakpoint, BreakReason, Point, TracePointClass


@dataclass
class CorridorState:
    """Open segment of the simplified polyline.

    Attributes:
        segment_begin_index: Index of the segment's first point
        tangent0: First point of the tangent line (the segment start)
        tangent1: Second point of the tangent line, None until defined
    """

    segment_begin_index: int = 0
    tangent0: Point | None = None
    tangent1: Point | None = None

    def restart(self, index: int, point: Point) -> None:
        """Open a new segment at the given point."""
        self.segment_begin_index = index
        self.tangent0 = point
        self.tangent1 = None


def advance_corridor(
    state: CorridorState,
    buffer: PointBuffer,
    index: int,
    point_class: TracePointClass,
    tolerance_squared: float,
) -> Breakpoint | None:
    """Feed one finalized point to the simplifier.

    Points must be fed in index order, each exactly once.

    Args:
        state: Corridor state, updated in place
        buffer: Stroke samples
        index: Index of the finalized point
        point_class: Its final class
        tolerance_squared: Squared corridor half-width

    Returns:
        The breakpoint emitted for this point, or None if it was dropped
    """
    sample = buffer.fetch_sample(index)
    point = sample.point

    if point_class.is_critical:
        if index == state.segment_begin_index:
            reason = BreakReason.SEGMENT_START
        else:
            reason = BreakReason.CRITICAL_POINT
        state.restart(index, point)
        return Breakpoint(index, sample, point_class, reason)

    # The stroke start is always critical, so tangent0 is set by now
    if state.tangent1 is None:
        # Duplicate of the segment start cannot define a direction; keep
        # waiting for a distinct point.
        if point != state.tangent0:
            state.tangent1 = point
        return None

    distance = point_line_distance(point, state.tangent0, state.tangent1)
    if distance * distance > tolerance_squared:
        state.restart(index, point)
        return Breakpoint(index, sample, point_class, BreakReason.CORRIDOR_BREAK)

    return None
