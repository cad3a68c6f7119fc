"""Strokeline - Online curvature classification and simplification of strokes.

Strokeline consumes a stream of timestamped 2D samples (stylus, finger or mouse
input) in chunks, classifies every point as normal, inflection or sharp edge
from its local curvature, and collapses redundant points into straight
segments that stay within an error corridor.

Example:
    $ strokeline stroke.json --tolerance 3 --chunk-size 8

This will create stroke-simplified.json with the breakpoints of the
simplified polyline and per-point analytics.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
