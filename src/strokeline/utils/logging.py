"""Logging utilities for Strokeline."""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from strokeline.domain import Breakpoint, BreakReason, TracePointClass


@dataclass
class StrokeStats:
    """Statistics from smoothing one stroke."""

    chunk_count: int = 0
    point_count: int = 0
    finalized_count: int = 0
    forced_count: int = 0
    class_counts: dict[TracePointClass, int] = field(
        default_factory=lambda: dict.fromkeys(TracePointClass, 0)
    )
    breakpoint_count: int = 0
    corridor_breaks: int = 0

    @property
    def dropped_count(self) -> int:
        """Finalized points the simplifier did not keep."""
        return self.finalized_count - self.breakpoint_count

    @property
    def inflection_count(self) -> int:
        return self.class_counts[TracePointClass.INFLECTION]

    @property
    def sharp_edge_count(self) -> int:
        return self.class_counts[TracePointClass.SHARP_EDGE]


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("strokeline")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get the package logger with whatever configuration is active."""
    return structlog.get_logger("strokeline")


class StrokeLogger:
    """Logger for tracking classification and simplification of a stroke."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = StrokeStats()

    def log_chunk(self, size: int, buffered: int) -> None:
        """Log arrival of a chunk of samples."""
        self._logger.debug("Chunk received", size=size, buffered=buffered)
        self._stats.chunk_count += 1
        self._stats.point_count += size

    def log_timestamp_regression(self, index: int, previous: int, timestamp: int) -> None:
        """Log a sample whose timestamp precedes its predecessor's."""
        self._logger.warning(
            "Sample timestamp decreased",
            index=index,
            previous=previous,
            timestamp=timestamp,
        )

    def log_point_classified(
        self,
        index: int,
        point_class: TracePointClass,
        curvature: float,
        forced: bool,
    ) -> None:
        """Log the final class of a point."""
        self._logger.debug(
            "Point classified",
            index=index,
            point_class=point_class.value,
            curvature=None if math.isnan(curvature) else round(curvature, 4),
            forced=forced,
        )
        self._stats.finalized_count += 1
        self._stats.class_counts[point_class] += 1
        if forced:
            self._stats.forced_count += 1

    def log_breakpoint(self, kept: Breakpoint, curvature_window: list[float]) -> None:
        """Log a breakpoint emitted by the simplifier."""
        self._logger.debug(
            "Breakpoint emitted",
            index=kept.index,
            x=kept.point.x,
            y=kept.point.y,
            point_class=kept.point_class.value,
            reason=kept.reason.value,
            curvature_window=[None if math.isnan(k) else round(k, 4) for k in curvature_window],
        )
        self._stats.breakpoint_count += 1
        if kept.reason is BreakReason.CORRIDOR_BREAK:
            self._stats.corridor_breaks += 1

    def log_stream_end(self, point_count: int, processed_offset: int) -> None:
        """Log the end-of-stream signal."""
        self._logger.debug(
            "Stream ended",
            points=point_count,
            processed_offset=processed_offset,
        )

    def log_stroke_complete(self) -> None:
        """Log the summary of a finished stroke."""
        self._logger.info(
            "Stroke simplified",
            points=self._stats.point_count,
            chunks=self._stats.chunk_count,
            breakpoints=self._stats.breakpoint_count,
            inflections=self._stats.inflection_count,
            sharp_edges=self._stats.sharp_edge_count,
            corridor_breaks=self._stats.corridor_breaks,
        )

    @property
    def stats(self) -> StrokeStats:
        """Get current stroke statistics."""
        return self._stats
