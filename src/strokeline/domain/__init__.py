"""Domain models for strokeline.

This module contains the core domain models representing stroke samples,
point classes and the results of smoothing. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries for trace files
- Independent of the engine's internal state

Key classes:
- Point: A 2D stroke location
- Vector2: A 2D displacement
- Sample: A timestamped input event
- TracePointClass: Normal, inflection or sharp edge
- Breakpoint: A retained vertex of the simplified polyline
- SmoothingResult: Full output for one stroke
"""

from strokeline.domain.classification import BreakReason, TracePointClass
from strokeline.domain.point import Point, Sample, Vector2, ieee_divide
from strokeline.domain.result import (
    Breakpoint,
    PointAnalytics,
    SmoothingResult,
    TraceAnalytics,
)

__all__: list[str] = [
    # Enums
    "BreakReason",
    "TracePointClass",
    # Core types
    "Point",
    "Vector2",
    "Sample",
    "Breakpoint",
    "PointAnalytics",
    "TraceAnalytics",
    "SmoothingResult",
    # Helpers
    "ieee_divide",
]
