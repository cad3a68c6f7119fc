"""Integration tests for streaming behavior across whole strokes.

These tests replay complete strokes through the engine with different chunk
sizes and check properties that must hold regardless of how the input is
split: identical classes, identical breakpoints, and a simplified polyline
that keeps every dropped point inside its segment's corridor.
"""

import math

import pytest

from strokeline.core import InputSmoother, point_line_distance, smooth_trace
from strokeline.domain import BreakReason, TracePointClass

CHUNK_SIZES = [1, 2, 3, 5, 7, 16]


def summarize(result):
    classes = [p.point_class for p in result.analytics.points]
    curvatures = [
        None if math.isnan(p.curvature) else p.curvature for p in result.analytics.points
    ]
    breakpoints = [(b.index, b.point_class, b.reason) for b in result.breakpoints]
    return classes, curvatures, breakpoints


@pytest.fixture(params=["corner_stroke", "straight_stroke", "arc_stroke", "wave_stroke"])
def stroke(request):
    return request.getfixturevalue(request.param)


class TestChunkInvariance:
    """Output must not depend on how samples are chunked."""

    @pytest.mark.parametrize("chunk_size", CHUNK_SIZES)
    def test_same_result_for_any_chunking(self, stroke, chunk_size):
        """Every chunk size gives the whole-trace result."""
        reference = summarize(smooth_trace(stroke))
        assert summarize(smooth_trace(stroke, chunk_size=chunk_size)) == reference

    def test_breakpoints_are_never_revised(self, stroke):
        """Breakpoints returned early are a prefix of the final list."""
        smoother = InputSmoother()
        seen = []
        for sample in stroke:
            seen.extend(smoother.on_chunk([sample]))
            assert smoother.breakpoints == seen
        seen.extend(smoother.on_stream_end())
        assert smoother.breakpoints == seen

    def test_classes_are_never_revised(self, stroke):
        """Finalized classes stay the same while the stroke grows."""
        smoother = InputSmoother()
        previous = []
        for sample in stroke:
            smoother.on_chunk([sample])
            current = [p.point_class for p in smoother.result().analytics.points]
            assert current[: len(previous)] == previous
            previous = current


class TestStrokeShapes:
    """End-to-end results for characteristic shapes."""

    def test_every_point_finalized(self, stroke):
        """After the stream ends, every point has a class."""
        result = smooth_trace(stroke, chunk_size=4)
        assert len(result.analytics) == len(stroke)
        assert [p.index for p in result.analytics.points] == list(range(len(stroke)))

    def test_boundaries_are_kept(self, stroke):
        """The first and last points are always breakpoints."""
        result = smooth_trace(stroke, chunk_size=4)
        assert result.breakpoints[0].index == 0
        assert result.breakpoints[0].reason is BreakReason.SEGMENT_START
        assert result.breakpoints[-1].index == len(stroke) - 1
        assert result.breakpoints[-1].point_class is TracePointClass.SHARP_EDGE

    def test_critical_points_are_kept(self, stroke):
        """Every inflection and sharp edge is a breakpoint."""
        result = smooth_trace(stroke)
        kept = {b.index for b in result.breakpoints}
        assert set(result.analytics.critical_indices()) <= kept

    def test_corner(self, corner_stroke):
        """The corner keeps its ends and the three critical points around the bend."""
        result = smooth_trace(corner_stroke, chunk_size=3)
        assert [(b.index, b.reason) for b in result.breakpoints] == [
            (0, BreakReason.SEGMENT_START),
            (3, BreakReason.CRITICAL_POINT),
            (4, BreakReason.CRITICAL_POINT),
            (5, BreakReason.CRITICAL_POINT),
            (7, BreakReason.CRITICAL_POINT),
        ]

    def test_straight_line(self, straight_stroke):
        """A straight line reduces to two points."""
        result = smooth_trace(straight_stroke, chunk_size=2)
        assert len(result.simplified_trace) == 2
        assert result.reduction_ratio == pytest.approx(0.8)

    def test_wave_has_inflections(self, wave_stroke):
        """Peaks and troughs of a wave flip the curvature sign."""
        result = smooth_trace(wave_stroke)
        classes = [p.point_class for p in result.analytics.points]
        assert TracePointClass.INFLECTION in classes

    def test_arc_is_smooth(self, arc_stroke):
        """A wide arc has no critical interior points."""
        result = smooth_trace(arc_stroke)
        interior = result.analytics.points[1:-1]
        assert all(p.point_class is TracePointClass.NORMAL for p in interior)

    def test_arc_breaks_corridor(self, arc_stroke):
        """A long arc leaves the corridor at least once."""
        result = smooth_trace(arc_stroke, tolerance=3.0)
        reasons = [b.reason for b in result.breakpoints]
        assert BreakReason.CORRIDOR_BREAK in reasons

    def test_larger_tolerance_keeps_fewer_points(self, arc_stroke):
        """Widening the corridor never adds breakpoints on a smooth stroke."""
        narrow = smooth_trace(arc_stroke, tolerance=1.0)
        wide = smooth_trace(arc_stroke, tolerance=10.0)
        assert len(wide.breakpoints) <= len(narrow.breakpoints)


class TestCorridorInvariant:
    """Dropped points stay within tolerance of their segment's tangent line."""

    @pytest.mark.parametrize("tolerance", [0.5, 3.0, 8.0])
    def test_dropped_points_within_tolerance(self, arc_stroke, tolerance):
        """Check every dropped point against the tangent of its segment."""
        result = smooth_trace(arc_stroke, tolerance=tolerance)
        points = [s.point for s in arc_stroke]
        indices = [b.index for b in result.breakpoints]

        for begin, end in zip(indices, indices[1:]):
            # The point after the segment start defines the tangent
            for index in range(begin + 2, end):
                d = point_line_distance(points[index], points[begin], points[begin + 1])
                assert abs(d) <= tolerance
