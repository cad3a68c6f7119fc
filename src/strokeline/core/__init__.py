"""Core processing algorithms for strokeline.

This module contains the core algorithms for:

- Geometry operations (vectors, point-to-line distance)
- Curvature estimation from five-point central differences
- Streaming point classification (normal, inflection, sharp edge)
- Online corridor simplification of the classified stroke

The numeric parts are pure functions over an explicit state:
- Curvature and distance functions take points and return values
- Classifier and simplifier functions take a state dataclass and advance it

Key functions:
- point_line_distance: Signed distance of a point from a line
- i_curvature: Curvature at the middle of five points
- estimate_curvature: Curvature at a buffered index
- classify_curvature: Class from a curvature and its predecessor
- advance / finish: Drive the classifier state machine
- advance_corridor: Feed one finalized point to the simplifier
- smooth_trace: Run a whole trace through a fresh smoother

Key classes:
- PointBuffer: Append-only sample arena
- AnalyticsRecorder: Per-index curvature and class tables
- InputSmoother: Per-stroke streaming engine
"""

from strokeline.core.analytics import AnalyticsRecorder
from strokeline.core.buffer import PointBuffer
from strokeline.core.classifier import (
    SHARP_EDGE_CURVATURE,
    Classification,
    ClassifierState,
    advance,
    can_be_computed_later,
    classify_curvature,
    classify_index,
    finish,
    is_computable_now,
)
from strokeline.core.curvature import (
    CurvatureEstimate,
    estimate_curvature,
    has_neighborhood,
    i_curvature,
    sign,
)
from strokeline.core.geometry import (
    cross,
    dot,
    length,
    point_line_distance,
    vector_between,
)
from strokeline.core.simplifier import CorridorState, advance_corridor
from strokeline.core.smoother import InputSmoother, smooth_trace

__all__ = [
    "SHARP_EDGE_CURVATURE",
    # Analytics classes
    "AnalyticsRecorder",
    # Classifier
    "Classification",
    "ClassifierState",
    # Simplifier
    "CorridorState",
    # Curvature
    "CurvatureEstimate",
    # Smoother classes
    "InputSmoother",
    # Buffer classes
    "PointBuffer",
    "advance",
    "advance_corridor",
    "can_be_computed_later",
    "classify_curvature",
    "classify_index",
    # Geometry functions
    "cross",
    "dot",
    "estimate_curvature",
    "finish",
    "has_neighborhood",
    "i_curvature",
    "is_computable_now",
    "length",
    "point_line_distance",
    "sign",
    "smooth_trace",
    "vector_between",
]
