"""Streaming stroke smoother.

This module ties the engine together: samples are appended to the point
buffer, the classifier finalizes every index that has enough look-ahead, and
each finalized point is fed to the corridor simplifier in order.

Key components:
- InputSmoother: Per-stroke engine driven by on_chunk / on_stream_end
- smooth_trace: Replays a recorded trace through a fresh smoother
"""

from collections.abc import Callable, Iterable, Sequence

import structlog
from pydantic import ValidationError

from strokeline.config import DEFAULT_TOLERANCE, SimplifierConfig
from strokeline.core.analytics import AnalyticsRecorder
from strokeline.core.buffer import PointBuffer
from strokeline.core.classifier import Classification, ClassifierState, advance, finish
from strokeline.core.simplifier import CorridorState, advance_corridor
from strokeline.domain import Breakpoint, Point, Sample, SmoothingResult
from strokeline.exceptions import InvalidToleranceError, StrokeFinishedError
from strokeline.utils import StrokeLogger, StrokeStats, get_logger

BreakpointSink = Callable[[Breakpoint], None]


class InputSmoother:
    """Classifies and simplifies one stroke as its samples arrive.

    Every call does work proportional to the number of indices it can
    finalize and returns without waiting for more input. Finalized classes,
    curvatures and breakpoints are never revised, so consumers may stream
    them as they are emitted.

    One instance handles exactly one stroke. After on_stream_end() the
    instance is closed; start the next stroke with a new instance.

    Example:
        smoother = InputSmoother(tolerance=3.0)
        smoother.on_chunk([Sample.at(0, 0, 0), Sample.at(1, 0, 8)])
        smoother.on_chunk(more_samples)
        smoother.on_stream_end()
        result = smoother.result()
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        on_breakpoint: BreakpointSink | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize a smoother for a new stroke.

        Args:
            tolerance: Corridor half-width in input units
            on_breakpoint: Optional sink called with each breakpoint as it is
                emitted
            logger: Structured logger (package logger if None)

        Raises:
            InvalidToleranceError: If tolerance is negative or not finite
        """
        try:
            config = SimplifierConfig(tolerance=tolerance)
        except ValidationError as e:
            raise InvalidToleranceError(tolerance, e.errors()[0]["msg"]) from e

        self.config = config
        self._on_breakpoint = on_breakpoint
        self._stroke_logger = StrokeLogger(logger if logger is not None else get_logger())

        self._buffer = PointBuffer()
        self._analytics = AnalyticsRecorder()
        self._classifier = ClassifierState()
        self._corridor = CorridorState()
        self._breakpoints: list[Breakpoint] = []
        self._finished = False

    @classmethod
    def from_config(
        cls,
        config: SimplifierConfig,
        on_breakpoint: BreakpointSink | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> "InputSmoother":
        """Create a smoother from validated settings."""
        return cls(tolerance=config.tolerance, on_breakpoint=on_breakpoint, logger=logger)

    @property
    def tolerance(self) -> float:
        return self.config.tolerance

    @property
    def processed_offset(self) -> int:
        """First index whose class is not final yet."""
        return self._classifier.processed_offset

    @property
    def point_count(self) -> int:
        return len(self._buffer)

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def breakpoints(self) -> list[Breakpoint]:
        """Breakpoints emitted so far, in order."""
        return list(self._breakpoints)

    @property
    def stats(self) -> StrokeStats:
        return self._stroke_logger.stats

    def on_chunk(self, chunk: Iterable[Sample]) -> list[Breakpoint]:
        """Append newly arrived samples and process as far as possible.

        Processing stops at the first index that still needs look-ahead; it
        resumes there on the next call. An empty chunk is a no-op.

        Args:
            chunk: Samples in arrival order

        Returns:
            Breakpoints emitted while processing this chunk

        Raises:
            StrokeFinishedError: If the stream has already ended
        """
        if self._finished:
            raise StrokeFinishedError("on_chunk", len(self._buffer))

        samples = list(chunk)
        if not samples:
            return []

        self._append(samples)
        return self._finalize(advance(self._classifier, self._buffer))

    def on_stream_end(self) -> list[Breakpoint]:
        """Finalize the rest of the stroke.

        Remaining points become normal and the last point of the stroke
        becomes a sharp edge, which closes the simplified polyline.

        Returns:
            Breakpoints emitted while finalizing

        Raises:
            StrokeFinishedError: If the stream has already ended
        """
        if self._finished:
            raise StrokeFinishedError("on_stream_end", len(self._buffer))
        self._finished = True

        self._stroke_logger.log_stream_end(len(self._buffer), self.processed_offset)
        emitted = self._finalize(finish(self._classifier, self._buffer))
        self._stroke_logger.log_stroke_complete()
        return emitted

    def curvature_window(self, around: int, back: int, forth: int) -> list[float]:
        """Stored curvatures in ``[around - back, around + forth]``.

        Clamped to the buffered points. Indices not computed yet, and
        points classified without curvature, read as NaN.
        """
        return self._analytics.curvature_window(around, back, forth)

    def fetch_point(self, index: int) -> Point:
        """Read a buffered point.

        Raises:
            IndexError: If the index is not buffered
        """
        return self._buffer.fetch_point(index)

    def result(self) -> SmoothingResult:
        """Snapshot of everything finalized so far.

        Returns:
            SmoothingResult covering the finalized prefix of the stroke
        """
        return SmoothingResult(
            analytics=self._analytics.snapshot(self.processed_offset),
            original_trace=self._buffer.samples(),
            simplified_trace=[b.sample for b in self._breakpoints],
            breakpoints=list(self._breakpoints),
            tolerance=self.tolerance,
        )

    def _append(self, samples: list[Sample]) -> None:
        previous = self._buffer.last_timestamp
        for offset, sample in enumerate(samples):
            if previous is not None and sample.timestamp < previous:
                self._stroke_logger.log_timestamp_regression(
                    len(self._buffer) + offset, previous, sample.timestamp
                )
            previous = sample.timestamp

        self._buffer.extend(samples)
        self._analytics.grow(len(self._buffer))
        self._stroke_logger.log_chunk(len(samples), len(self._buffer))

    def _finalize(self, classifications: list[Classification]) -> list[Breakpoint]:
        emitted: list[Breakpoint] = []
        for step in classifications:
            self._analytics.record(step.index, step.point_class, step.estimate, step.forced)
            self._stroke_logger.log_point_classified(
                step.index,
                step.point_class,
                self._analytics.curvature_at(step.index),
                step.forced,
            )

            kept = advance_corridor(
                self._corridor,
                self._buffer,
                step.index,
                step.point_class,
                self.config.tolerance_squared,
            )
            if kept is None:
                continue

            self._breakpoints.append(kept)
            emitted.append(kept)
            self._stroke_logger.log_breakpoint(
                kept, self._analytics.curvature_window(step.index, 1, 1)
            )
            if self._on_breakpoint is not None:
                self._on_breakpoint(kept)
        return emitted


def smooth_trace(
    samples: Sequence[Sample],
    tolerance: float = DEFAULT_TOLERANCE,
    chunk_size: int | None = None,
    on_breakpoint: BreakpointSink | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> SmoothingResult:
    """Replay a complete trace through a fresh smoother.

    Args:
        samples: All samples of the stroke
        tolerance: Corridor half-width
        chunk_size: Samples per on_chunk call (whole trace at once if None)
        on_breakpoint: Optional breakpoint sink
        logger: Structured logger (package logger if None)

    Returns:
        SmoothingResult of the finished stroke

    Raises:
        InvalidToleranceError: If tolerance is invalid
        ValueError: If chunk_size is not positive
    """
    if chunk_size is not None and chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    smoother = InputSmoother(tolerance=tolerance, on_breakpoint=on_breakpoint, logger=logger)
    step = chunk_size or max(len(samples), 1)
    for start in range(0, len(samples), step):
        smoother.on_chunk(samples[start : start + step])
    smoother.on_stream_end()
    return smoother.result()
