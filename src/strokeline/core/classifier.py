"""Streaming point classification state machine.

Each index moves through three states: unavailable (not enough neighbors
buffered yet), computable, and finalized. Processing always resumes at the
first unfinalized index and walks forward until it reaches an index that
still needs look-ahead, so the only state carried between chunks is the
processed offset and the previous curvature value.

Which points have what, for a buffer ending at N with L the last finalized
point:

           L         N
    . . . . . . . . . .     points
      1 1 1 1 1 1 1 1       first derivative
        2 2 2 2 2 2         second derivative
        c c c c c c         curvature
    k k k k k k             class (lags curvature by the sign comparison)

Index 0 is always computable: the stroke start is a critical point. Index 1
can never have two points before it, so it is forced to normal as soon as a
later point exists.
"""

import math
from dataclasses import dataclass

from strokeline.core.buffer import PointBuffer
from strokeline.core.curvature import (
    NEIGHBORHOOD_RADIUS,
    CurvatureEstimate,
    estimate_curvature,
    has_neighborhood,
    sign,
)
from strokeline.domain import TracePointClass

# Curvature above which a point without a sign change is a sharp edge
SHARP_EDGE_CURVATURE = 2.0


@dataclass
class ClassifierState:
    """Resumable classifier state of one stroke.

    Attributes:
        processed_offset: First index without a final class
        prev_curvature: Curvature of the last classified point (lag of one),
            NaN until the first curvature is computed
    """

    processed_offset: int = 0
    prev_curvature: float = math.nan


@dataclass(frozen=True)
class Classification:
    """Final class of one index.

    Attributes:
        index: Point index
        point_class: Assigned class
        estimate: Curvature estimate, None if the class was forced
        forced: True if the class was assigned without computing curvature
    """

    index: int
    point_class: TracePointClass
    estimate: CurvatureEstimate | None = None
    forced: bool = False


def is_computable_now(buffer: PointBuffer, index: int) -> bool:
    """Whether an index can be classified with the points buffered so far."""
    return index == 0 or has_neighborhood(buffer, index)


def can_be_computed_later(buffer: PointBuffer, index: int) -> bool:
    """Whether more input could make a non-computable index computable.

    Only look-ahead can arrive later; an index without two points before it
    never becomes computable.
    """
    return buffer.points_before(index) >= NEIGHBORHOOD_RADIUS


def classify_curvature(prev_curvature: float, curvature: float) -> TracePointClass:
    """Classify a point from its curvature and its predecessor's.

    A sign change takes priority over the magnitude test. NaN on either side
    never counts as a sign change.

    Args:
        prev_curvature: Curvature of the previous classified point
        curvature: Curvature of this point

    Returns:
        INFLECTION on a sign change, SHARP_EDGE above the threshold,
        NORMAL otherwise

    Examples:
        >>> classify_curvature(0.5, -0.5)
        <TracePointClass.INFLECTION: 'inflection'>
        >>> classify_curvature(0.5, 2.5)
        <TracePointClass.SHARP_EDGE: 'sharp_edge'>
    """
    sign_changed = (
        not math.isnan(prev_curvature)
        and not math.isnan(curvature)
        and sign(prev_curvature) != sign(curvature)
    )
    if sign_changed:
        return TracePointClass.INFLECTION
    if curvature > SHARP_EDGE_CURVATURE:
        return TracePointClass.SHARP_EDGE
    return TracePointClass.NORMAL


def classify_index(state: ClassifierState, buffer: PointBuffer, index: int) -> Classification:
    """Classify a computable index and update the curvature lag.

    Args:
        state: Classifier state, ``prev_curvature`` is updated
        buffer: Stroke samples
        index: Computable index

    Returns:
        Classification of the index
    """
    if index == 0:
        return Classification(index, TracePointClass.SHARP_EDGE, forced=True)

    estimate = estimate_curvature(buffer, index)
    curvature = estimate.curvature
    if math.isnan(state.prev_curvature):
        # First curvature of the stroke: compare against itself
        state.prev_curvature = curvature

    point_class = classify_curvature(state.prev_curvature, curvature)
    state.prev_curvature = curvature
    return Classification(index, point_class, estimate)


def advance(state: ClassifierState, buffer: PointBuffer) -> list[Classification]:
    """Finalize every index that has become classifiable.

    Walks forward from the processed offset and stops at the first index that
    is waiting for look-ahead. The stroke start (index 0) is final as soon as
    it arrives, even when it is the only buffered point. Any later last
    buffered point is never finalized here; only the end of the stream
    decides its class.

    Args:
        state: Classifier state, advanced in place
        buffer: Stroke samples

    Returns:
        Classifications in index order
    """
    finalized: list[Classification] = []
    while state.processed_offset < len(buffer):
        index = state.processed_offset
        if is_computable_now(buffer, index):
            step = classify_index(state, buffer, index)
        elif not can_be_computed_later(buffer, index):
            if buffer.points_after(index) == 0:
                break
            step = Classification(index, TracePointClass.NORMAL, forced=True)
        else:
            break
        finalized.append(step)
        state.processed_offset += 1
    return finalized


def finish(state: ClassifierState, buffer: PointBuffer) -> list[Classification]:
    """Force-finalize the rest of the stroke at end of stream.

    Every remaining index but the last becomes NORMAL, and the last point of
    the stroke becomes SHARP_EDGE.

    Args:
        state: Classifier state, advanced to the end of the buffer
        buffer: Stroke samples

    Returns:
        Classifications in index order
    """
    finalized: list[Classification] = []
    last = buffer.last_index
    for index in range(state.processed_offset, last):
        finalized.append(Classification(index, TracePointClass.NORMAL, forced=True))
    if state.processed_offset <= last:
        finalized.append(Classification(last, TracePointClass.SHARP_EDGE, forced=True))
    state.processed_offset = len(buffer)
    return finalized
