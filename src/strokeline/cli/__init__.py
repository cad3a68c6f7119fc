"""Command-line interface for strokeline.

The ``strokeline`` command loads a recorded JSON or CSV trace, replays it
through the streaming engine in fixed-size chunks the way live pen input
would arrive, and writes the simplified polyline with per-point analytics.
Console output uses Rich; ``--show-points`` prints every classified point.
"""

from strokeline.cli.app import cli, main

__all__ = ["cli", "main"]
