"""Point classes produced by the curvature classifier."""

from enum import Enum


class TracePointClass(Enum):
    """Classification of a stroke point from its local curvature.

    - NORMAL: smooth point, candidate for dropping by the simplifier
    - INFLECTION: curvature changed sign relative to the previous point
    - SHARP_EDGE: curvature above the sharp edge threshold, or a stroke end

    Inflection and sharp edge points are critical: the simplifier always keeps
    them as breakpoints.
    """

    NORMAL = "normal"
    INFLECTION = "inflection"
    SHARP_EDGE = "sharp_edge"

    @property
    def is_critical(self) -> bool:
        """Whether the simplifier must preserve this point."""
        return self is not TracePointClass.NORMAL


class BreakReason(Enum):
    """Why the simplifier emitted a breakpoint."""

    SEGMENT_START = "segment_start"
    CRITICAL_POINT = "critical_point"
    CORRIDOR_BREAK = "corridor_break"
