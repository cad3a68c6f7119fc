"""Output types of the smoothing engine.

This module defines what the engine hands back to its host: the breakpoints of
the simplified polyline as they are emitted, and a per-point analytics record
for inspection.
"""

from dataclasses import dataclass, field
from typing import Any

from strokeline.domain.classification import BreakReason, TracePointClass
from strokeline.domain.point import Point, Sample, Vector2


@dataclass(frozen=True)
class Breakpoint:
    """A retained vertex of the simplified polyline.

    Attributes:
        index: Absolute index of the point in the stroke
        sample: The input sample kept at this vertex
        point_class: Classification of the point
        reason: Why the simplifier kept the point
    """

    index: int
    sample: Sample
    point_class: TracePointClass
    reason: BreakReason

    @property
    def point(self) -> Point:
        """Location of the breakpoint."""
        return self.sample.point

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the breakpoint
        """
        return {
            "index": self.index,
            **self.sample.to_dict(),
            "class": self.point_class.value,
            "reason": self.reason.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Breakpoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a breakpoint

        Returns:
            Breakpoint instance
        """
        return cls(
            index=data["index"],
            sample=Sample.from_dict(data),
            point_class=TracePointClass(data["class"]),
            reason=BreakReason(data["reason"]),
        )


@dataclass(frozen=True)
class PointAnalytics:
    """Finalized values recorded for one stroke point.

    Attributes:
        index: Absolute index of the point
        first_derivative: Central first difference, None when not computed
        second_derivative: Central second difference, None when not computed
        curvature: Signed i-curvature, NaN when not computed
        point_class: Final classification
        forced: True if the class was assigned without curvature (stroke
            boundaries and trailing points)
    """

    index: int
    first_derivative: Vector2 | None
    second_derivative: Vector2 | None
    curvature: float
    point_class: TracePointClass
    forced: bool = False


@dataclass(frozen=True)
class TraceAnalytics:
    """Per-index analytics of the finalized part of a stroke."""

    points: tuple[PointAnalytics, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def curvature_at(self, index: int) -> float:
        return self.points[index].curvature

    def point_class_at(self, index: int) -> TracePointClass:
        return self.points[index].point_class

    def derivative_at(self, degree: int, index: int) -> Vector2 | None:
        """Get the first or second derivative recorded at an index.

        Args:
            degree: 1 for the first derivative, 2 for the second
            index: Absolute point index

        Returns:
            The derivative vector, or None if it was not computed

        Raises:
            ValueError: If degree is not 1 or 2
        """
        if degree == 1:
            return self.points[index].first_derivative
        if degree == 2:
            return self.points[index].second_derivative
        raise ValueError(f"Derivative degree must be 1 or 2, got {degree}")

    def critical_indices(self) -> list[int]:
        """Indices of all inflection and sharp edge points."""
        return [p.index for p in self.points if p.point_class.is_critical]


@dataclass
class SmoothingResult:
    """Everything the engine produced for one stroke.

    Attributes:
        analytics: Per-point analytics of the finalized points
        original_trace: Every sample received, in order
        simplified_trace: Samples kept as breakpoints, in order
        breakpoints: Breakpoints with their classes and reasons
        tolerance: Corridor tolerance the stroke was simplified with
    """

    analytics: TraceAnalytics
    original_trace: list[Sample] = field(default_factory=list)
    simplified_trace: list[Sample] = field(default_factory=list)
    breakpoints: list[Breakpoint] = field(default_factory=list)
    tolerance: float = 0.0

    @property
    def reduction_ratio(self) -> float:
        """Fraction of input samples dropped by the simplifier."""
        if not self.original_trace:
            return 0.0
        return 1.0 - len(self.simplified_trace) / len(self.original_trace)
