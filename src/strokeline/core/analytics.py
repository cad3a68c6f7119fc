"""Per-index record of derivatives, curvature and classification.

The recorder grows in lock step with the point buffer. Values are written
once, when an index is finalized, and never revised afterwards, so anything
read from the recorder below the processed offset is final.
"""

import math

from strokeline.core.curvature import CurvatureEstimate
from strokeline.domain import PointAnalytics, TraceAnalytics, TracePointClass, Vector2


class AnalyticsRecorder:
    """Curvature and classification tables parallel to the point buffer.

    Unfinalized indices hold NaN curvature and no class.
    """

    def __init__(self) -> None:
        self._first_derivatives: list[Vector2 | None] = []
        self._second_derivatives: list[Vector2 | None] = []
        self._curvatures: list[float] = []
        self._point_classes: list[TracePointClass | None] = []
        self._forced: list[bool] = []

    def __len__(self) -> int:
        return len(self._curvatures)

    def grow(self, size: int) -> None:
        """Extend the tables with empty slots up to the given size."""
        missing = size - len(self._curvatures)
        if missing <= 0:
            return
        self._first_derivatives.extend([None] * missing)
        self._second_derivatives.extend([None] * missing)
        self._curvatures.extend([math.nan] * missing)
        self._point_classes.extend([None] * missing)
        self._forced.extend([False] * missing)

    def record(
        self,
        index: int,
        point_class: TracePointClass,
        estimate: CurvatureEstimate | None = None,
        forced: bool = False,
    ) -> None:
        """Finalize the values of an index.

        Args:
            index: Point index
            point_class: Final classification
            estimate: Curvature estimate, None when the class was assigned
                without one
            forced: Whether the class was forced rather than computed

        Raises:
            RuntimeError: If the index was already finalized
        """
        if self._point_classes[index] is not None:
            raise RuntimeError(f"Point {index} is already finalized")

        if estimate is not None:
            self._first_derivatives[index] = estimate.first_derivative
            self._second_derivatives[index] = estimate.second_derivative
            self._curvatures[index] = estimate.curvature
        self._point_classes[index] = point_class
        self._forced[index] = forced

    def curvature_at(self, index: int) -> float:
        return self._curvatures[index]

    def point_class_at(self, index: int) -> TracePointClass | None:
        return self._point_classes[index]

    def curvature_window(self, around: int, back: int, forth: int) -> list[float]:
        """Stored curvatures in ``[around - back, around + forth]``.

        The window is clamped to the recorded range, so it shrinks near
        either end of the stroke. It is empty for an empty stroke and for a
        window that lies entirely outside the stroke.

        Args:
            around: Center index
            back: Number of indices before the center
            forth: Number of indices after the center

        Returns:
            Curvature values in index order (NaN where not computed)
        """
        begin = max(around - back, 0)
        end = min(around + forth, len(self._curvatures) - 1)
        if end < begin:
            return []
        return self._curvatures[begin : end + 1]

    def snapshot(self, count: int) -> TraceAnalytics:
        """Build immutable analytics for the first ``count`` indices.

        Args:
            count: Number of leading indices to include, normally the
                processed offset

        Returns:
            TraceAnalytics for indices ``0 .. count - 1``
        """
        points = []
        for index in range(count):
            point_class = self._point_classes[index]
            if point_class is None:
                raise RuntimeError(f"Point {index} is not finalized")
            points.append(
                PointAnalytics(
                    index=index,
                    first_derivative=self._first_derivatives[index],
                    second_derivative=self._second_derivatives[index],
                    curvature=self._curvatures[index],
                    point_class=point_class,
                    forced=self._forced[index],
                )
            )
        return TraceAnalytics(points=tuple(points))
