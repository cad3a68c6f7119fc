"""Append-only sample storage for one stroke.

The buffer is an arena indexed by absolute position: samples are only ever
appended, never removed or renumbered, so an index handed out once stays
valid for the lifetime of the stroke.
"""

from collections.abc import Iterable

from strokeline.domain import Point, Sample


class PointBuffer:
    """Ordered samples of a single stroke.

    Access is by absolute index. Indices outside ``[0, len)`` are programming
    errors and raise IndexError; negative indices are rejected instead of
    wrapping around.

    Example:
        buffer = PointBuffer()
        buffer.extend([Sample.at(0, 0), Sample.at(1, 0)])
        buffer.fetch_point(1)  # Point(x=1, y=0)
    """

    def __init__(self) -> None:
        self._samples: list[Sample] = []

    def __len__(self) -> int:
        return len(self._samples)

    def __bool__(self) -> bool:
        return bool(self._samples)

    def append(self, sample: Sample) -> int:
        """Append a sample.

        Returns:
            Index assigned to the sample
        """
        self._samples.append(sample)
        return len(self._samples) - 1

    def extend(self, samples: Iterable[Sample]) -> int:
        """Append samples in order.

        Returns:
            Number of samples appended
        """
        before = len(self._samples)
        self._samples.extend(samples)
        return len(self._samples) - before

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._samples):
            raise IndexError(
                f"Point index {index} out of range for stroke of {len(self._samples)} points"
            )

    def fetch_sample(self, index: int) -> Sample:
        self._check_index(index)
        return self._samples[index]

    def fetch_point(self, index: int) -> Point:
        self._check_index(index)
        return self._samples[index].point

    def points_before(self, index: int) -> int:
        """Number of buffered points preceding an index."""
        return index

    def points_after(self, index: int) -> int:
        """Number of buffered points following an index."""
        return len(self._samples) - index - 1

    @property
    def last_index(self) -> int:
        """Index of the most recent sample, -1 for an empty buffer."""
        return len(self._samples) - 1

    @property
    def last_timestamp(self) -> int | None:
        if not self._samples:
            return None
        return self._samples[-1].timestamp

    def samples(self) -> list[Sample]:
        """Copy of all samples, in order."""
        return list(self._samples)
