"""Shared fixtures for strokeline tests."""

import logging
import math

import pytest
import structlog

from strokeline.domain import Sample


@pytest.fixture(autouse=True)
def quiet_structlog():
    """Drop debug events from the engine during tests."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


def make_samples(points: list[tuple[float, float]], dt: int = 8) -> list[Sample]:
    """Build samples with evenly spaced timestamps."""
    return [Sample.at(x, y, i * dt) for i, (x, y) in enumerate(points)]


@pytest.fixture
def corner_stroke() -> list[Sample]:
    """L-shaped stroke with a 90 degree corner at index 4.

    Expected classes: 0 sharp edge (start), 1 normal (forced), 2 normal,
    3 inflection, 4 sharp edge (curvature 2*sqrt(2)), 5 inflection,
    6 normal (forced at end), 7 sharp edge (end).
    """
    return make_samples(
        [
            (0.0, 0.0),
            (0.5, 0.0),
            (1.0, 0.0),
            (1.5, 0.0),
            (2.0, 0.0),
            (2.0, 0.5),
            (2.0, 1.0),
            (2.0, 1.5),
        ]
    )


@pytest.fixture
def straight_stroke() -> list[Sample]:
    """Ten collinear points along y = 2x."""
    return make_samples([(float(i), 2.0 * i) for i in range(10)])


@pytest.fixture
def arc_stroke() -> list[Sample]:
    """Wide arc of radius 100 within one quadrant.

    Both coordinates increase along the whole arc, so the curvature sign
    never flips, and the curvature (about 0.01) stays far below the sharp
    edge threshold: every interior point is normal.
    """
    radius = 100.0
    points = []
    for i in range(28):
        t = 0.05 + 0.05 * i
        points.append((radius * math.sin(t), radius - radius * math.cos(t)))
    return make_samples(points)


@pytest.fixture
def wave_stroke() -> list[Sample]:
    """Sine wave with several peaks and troughs."""
    return make_samples([(0.5 * i, 2.0 * math.sin(0.5 * i)) for i in range(41)])
