"""Converters between trace file records and domain models.

This module handles the conversion between the plain records found in JSON
and CSV trace files and our domain models (Sample, SmoothingResult).
"""

import math
from collections.abc import Iterable
from typing import Any

from strokeline.domain import Breakpoint, PointAnalytics, Sample, SmoothingResult, Vector2

CSV_FIELDS = ("x", "y", "timestamp")


def record_to_sample(record: dict[str, Any], position: int) -> Sample:
    """Convert one trace record to a Sample.

    Records without a timestamp get their position in the trace, which
    keeps timestamps non-decreasing.

    Args:
        record: Mapping with x, y and optional timestamp
        position: Index of the record in the trace

    Returns:
        Sample instance

    Raises:
        KeyError: If x or y is missing
        ValueError: If a field is not numeric
    """
    timestamp = record.get("timestamp")
    if timestamp is None or timestamp == "":
        timestamp = position
    return Sample.at(float(record["x"]), float(record["y"]), int(timestamp))


def records_to_samples(records: Iterable[dict[str, Any]]) -> list[Sample]:
    """Convert trace records to samples, in order."""
    return [record_to_sample(record, position) for position, record in enumerate(records)]


def json_payload_to_records(payload: Any) -> list[dict[str, Any]]:
    """Extract sample records from a decoded JSON trace.

    Accepts either ``{"samples": [...]}`` or a bare list of records.

    Raises:
        ValueError: If the payload has neither shape
    """
    if isinstance(payload, dict):
        payload = payload.get("samples")
    if not isinstance(payload, list):
        raise ValueError("expected a list of samples or an object with a 'samples' list")
    for record in payload:
        if not isinstance(record, dict):
            raise ValueError(f"sample records must be objects, got {type(record).__name__}")
    return payload


def _finite_or_none(value: float) -> float | None:
    # JSON has no NaN or Infinity
    return value if math.isfinite(value) else None


def _vector_to_list(vector: Vector2 | None) -> list[float | None] | None:
    if vector is None:
        return None
    return [_finite_or_none(vector.x), _finite_or_none(vector.y)]


def sample_to_dict(sample: Sample) -> dict[str, Any]:
    """Serialize one sample, writing non-finite coordinates as null."""
    data = sample.to_dict()
    data["x"] = _finite_or_none(sample.point.x)
    data["y"] = _finite_or_none(sample.point.y)
    return data


def breakpoint_to_dict(kept: Breakpoint) -> dict[str, Any]:
    """Serialize one breakpoint, writing non-finite coordinates as null."""
    return {**kept.to_dict(), **sample_to_dict(kept.sample)}


def analytics_to_dict(point: PointAnalytics) -> dict[str, Any]:
    """Serialize one point's analytics for a result file."""
    return {
        "index": point.index,
        "first_derivative": _vector_to_list(point.first_derivative),
        "second_derivative": _vector_to_list(point.second_derivative),
        "curvature": _finite_or_none(point.curvature),
        "class": point.point_class.value,
        "forced": point.forced,
    }


def result_to_dict(result: SmoothingResult) -> dict[str, Any]:
    """Serialize a smoothing result for a JSON result file.

    Non-finite numbers (uncomputed or degenerate curvature, invalid sample
    coordinates) become null.

    Args:
        result: Result of a finished stroke

    Returns:
        JSON-compatible dictionary
    """
    return {
        "tolerance": result.tolerance,
        "point_count": len(result.original_trace),
        "breakpoint_count": len(result.breakpoints),
        "original_trace": [sample_to_dict(s) for s in result.original_trace],
        "simplified_trace": [sample_to_dict(s) for s in result.simplified_trace],
        "breakpoints": [breakpoint_to_dict(b) for b in result.breakpoints],
        "analytics": [analytics_to_dict(p) for p in result.analytics.points],
    }
