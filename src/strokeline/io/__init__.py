"""Trace I/O layer for strokeline.

This module handles reading recorded strokes and writing smoothing results.
It provides a clean abstraction layer between trace files and the domain
models.

Key responsibilities:
- Load JSON/CSV traces into Samples
- Serialize results, mapping non-finite values to null
- Write results with the simplified naming convention

Key classes:
- TraceReader: Load traces and replay them in chunks
- TraceWriter: Save smoothing results
"""

from strokeline.io.reader import TraceReader
from strokeline.io.writer import TraceWriter

__all__ = [
    "TraceReader",
    "TraceWriter",
]
