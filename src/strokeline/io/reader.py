"""Trace reader for loading recorded strokes.

This module provides the TraceReader class for loading JSON and CSV trace
files into domain Samples.
"""

import csv
import json
from collections.abc import Iterator
from pathlib import Path

from strokeline.domain import Sample
from strokeline.exceptions import TraceFormatError, TraceLoadError
from strokeline.io.converter import json_payload_to_records, records_to_samples

SUPPORTED_FORMATS = {".json": "JSON", ".csv": "CSV"}


class TraceReader:
    """Loads a recorded stroke from a trace file.

    JSON files hold ``{"samples": [{"x": .., "y": .., "timestamp": ..}]}``
    or a bare list of such records. CSV files have an ``x,y,timestamp``
    header; the timestamp column is optional.

    Example:
        reader = TraceReader(Path("stroke.json"))
        reader.load()
        for chunk in reader.iter_chunks(8):
            smoother.on_chunk(chunk)
    """

    def __init__(self, trace_path: Path) -> None:
        """Initialize the trace reader.

        Args:
            trace_path: Path to the JSON or CSV trace file
        """
        self._trace_path = trace_path
        self._samples: list[Sample] | None = None

    def load(self) -> None:
        """Load the trace file.

        Raises:
            FileNotFoundError: If trace file does not exist
            TraceFormatError: If the file type is unsupported or its content
                is malformed
            TraceLoadError: If the file cannot be read
        """
        if not self._trace_path.exists():
            raise FileNotFoundError(f"Trace file not found: {self._trace_path}")

        suffix = self._trace_path.suffix.lower()
        if suffix not in SUPPORTED_FORMATS:
            raise TraceFormatError(
                str(self._trace_path),
                f"unsupported extension '{suffix}' (expected .json or .csv)",
            )

        try:
            with self._trace_path.open(encoding="utf-8", newline="") as f:
                if suffix == ".json":
                    records = json_payload_to_records(json.load(f))
                else:
                    records = list(csv.DictReader(f))
            self._samples = records_to_samples(records)
        except OSError as e:
            raise TraceLoadError(str(self._trace_path), str(e)) from e
        except (KeyError, ValueError, TypeError) as e:
            raise TraceFormatError(str(self._trace_path), f"{type(e).__name__}: {e}") from e

    @property
    def format(self) -> str:
        """Return trace format.

        Returns:
            'JSON' or 'CSV'

        Raises:
            RuntimeError: If trace has not been loaded yet
        """
        if self._samples is None:
            raise RuntimeError("Trace not loaded. Call load() first.")

        return SUPPORTED_FORMATS[self._trace_path.suffix.lower()]

    @property
    def sample_count(self) -> int:
        """Return number of samples in the trace.

        Raises:
            RuntimeError: If trace has not been loaded yet
        """
        if self._samples is None:
            raise RuntimeError("Trace not loaded. Call load() first.")

        return len(self._samples)

    @property
    def samples(self) -> list[Sample]:
        """Return all samples in file order.

        Raises:
            RuntimeError: If trace has not been loaded yet
        """
        if self._samples is None:
            raise RuntimeError("Trace not loaded. Call load() first.")

        return list(self._samples)

    def iter_chunks(self, chunk_size: int) -> Iterator[list[Sample]]:
        """Iterate over the trace in consecutive chunks.

        Args:
            chunk_size: Samples per chunk (the last chunk may be shorter)

        Yields:
            Lists of samples in file order

        Raises:
            RuntimeError: If trace has not been loaded yet
            ValueError: If chunk_size is not positive
        """
        if self._samples is None:
            raise RuntimeError("Trace not loaded. Call load() first.")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        for start in range(0, len(self._samples), chunk_size):
            yield self._samples[start : start + chunk_size]
