"""Unit tests for curvature estimation.

Tests cover:
- The sign convention used by the classifier
- Curvature of straight and bent neighborhoods
- Degenerate neighborhoods (zero speed, horizontal motion)
- Neighborhood availability in the buffer
"""

import math

import pytest

from strokeline.core.buffer import PointBuffer
from strokeline.core.curvature import (
    estimate_curvature,
    has_neighborhood,
    i_curvature,
    sign,
)
from strokeline.domain import Point, Sample, Vector2


def points(*coords):
    return [Point(float(x), float(y)) for x, y in coords]


class TestSign:
    """Tests for the curvature sign convention."""

    def test_positive(self):
        """Strictly positive values are 1."""
        assert sign(0.5) == 1
        assert sign(math.inf) == 1

    def test_negative(self):
        """Negative values are -1."""
        assert sign(-0.5) == -1
        assert sign(-math.inf) == -1

    def test_zero_and_nan_are_negative(self):
        """Zero (either sign) and NaN map to -1."""
        assert sign(0.0) == -1
        assert sign(-0.0) == -1
        assert sign(math.nan) == -1


class TestICurvature:
    """Tests for the five-point curvature estimate."""

    def test_straight_line_has_zero_curvature(self):
        """Collinear, evenly spaced points have zero curvature."""
        estimate = i_curvature(*points((0, 0), (1, 2), (2, 4), (3, 6), (4, 8)))
        assert estimate.curvature == 0.0
        assert estimate.first_derivative == Vector2(1.0, 2.0)
        assert estimate.second_derivative == Vector2(0.0, 0.0)

    def test_corner(self):
        """A right angle at the middle point gives curvature 2*sqrt(2)."""
        estimate = i_curvature(*points((1, 0), (1.5, 0), (2, 0), (2, 0.5), (2, 1)))
        assert estimate.first_derivative == Vector2(0.25, 0.25)
        assert estimate.second_derivative == Vector2(0.25, -0.25)
        assert math.isclose(estimate.curvature, 2.0 * math.sqrt(2.0))

    def test_curvature_scales_inversely_with_size(self):
        """The same corner drawn twice as large has half the curvature."""
        estimate = i_curvature(*points((2, 0), (3, 0), (4, 0), (4, 1), (4, 2)))
        assert math.isclose(estimate.curvature, math.sqrt(2.0))

    def test_sign_follows_dx_over_dy(self):
        """Horizontal motion gives a signed infinite ratio, so the sign is dx's."""
        forward = i_curvature(*points((0, 0), (1, 0), (2, 0), (3, 0), (4, 1)))
        backward = i_curvature(*points((4, 1), (3, 0), (2, 0), (1, 0), (0, 0)))
        assert forward.curvature == 0.25
        assert backward.curvature == -0.25

    def test_vertical_motion_is_negative(self):
        """dx == 0 makes dx/dy zero, whose sign is -1."""
        estimate = i_curvature(*points((1.5, 0), (2, 0), (2, 0.5), (2, 1), (2, 1.5)))
        assert estimate.curvature == -0.5

    def test_zero_speed_gives_nan(self):
        """A neighborhood that returns to itself has no defined curvature."""
        estimate = i_curvature(*points((0, 0), (1, 0), (2, 0), (1, 0), (0, 0)))
        assert estimate.first_derivative == Vector2(0.0, 0.0)
        assert math.isnan(estimate.curvature)


class TestNeighborhood:
    """Tests for neighborhood lookup in the buffer."""

    @pytest.fixture
    def buffer(self):
        buffer = PointBuffer()
        buffer.extend(Sample.at(float(i), 0.0, i) for i in range(5))
        return buffer

    def test_has_neighborhood(self, buffer):
        """Only the middle of five points has two neighbors on each side."""
        assert [has_neighborhood(buffer, i) for i in range(5)] == [
            False,
            False,
            True,
            False,
            False,
        ]

    def test_estimate_curvature(self, buffer):
        """Test estimating curvature at a buffered index."""
        assert estimate_curvature(buffer, 2).curvature == 0.0

    def test_estimate_without_neighborhood_raises(self, buffer):
        """Missing neighbors are a programming error."""
        with pytest.raises(IndexError):
            estimate_curvature(buffer, 3)
