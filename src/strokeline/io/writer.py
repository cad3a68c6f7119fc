"""Result writer for saving simplified strokes.

This module provides the TraceWriter class for writing smoothing results
as JSON with the simplified naming convention.
"""

import json
from pathlib import Path

from strokeline.domain import SmoothingResult
from strokeline.exceptions import TraceSaveError
from strokeline.io.converter import result_to_dict


class TraceWriter:
    """Writes smoothing results to JSON.

    Example:
        writer = TraceWriter(result, Path("stroke-simplified.json"))
        writer.save()
    """

    def __init__(self, result: SmoothingResult, output_path: Path) -> None:
        """Initialize the trace writer.

        Args:
            result: Smoothing result to write
            output_path: Path where the result will be saved
        """
        self._result = result
        self._output_path = output_path

    def save(self) -> None:
        """Save the result file to the output path.

        Raises:
            TraceSaveError: If file cannot be written
        """
        payload = result_to_dict(self._result)
        try:
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, allow_nan=False)
                f.write("\n")
        except (OSError, ValueError) as e:
            raise TraceSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_simplified_path(input_path: Path) -> Path:
        """Generate output path with simplified naming convention.

        Converts: stroke.json -> stroke-simplified.json
                  pen/stroke-01.csv -> pen/stroke-01-simplified.json

        Args:
            input_path: Original trace file path

        Returns:
            Path with -simplified suffix and a .json extension
        """
        return input_path.parent / f"{input_path.stem}-simplified.json"
