"""Exception hierarchy for Strokeline."""


class StrokelineError(Exception):
    """Base exception for all Strokeline errors."""

    pass


class ConfigurationError(StrokelineError):
    """Errors related to engine configuration."""

    pass


class InvalidToleranceError(ConfigurationError):
    """Corridor tolerance is not a usable distance."""

    def __init__(self, tolerance: float, reason: str) -> None:
        self.tolerance = tolerance
        self.reason = reason
        super().__init__(f"Invalid corridor tolerance {tolerance!r}: {reason}")


class StrokeError(StrokelineError):
    """Errors related to stroke processing."""

    pass


class StrokeFinishedError(StrokeError):
    """The stroke was already finalized by an end-of-stream signal."""

    def __init__(self, operation: str, point_count: int) -> None:
        self.operation = operation
        self.point_count = point_count
        super().__init__(
            f"Cannot call {operation}() on a finished stroke ({point_count} points); "
            "create a new smoother for the next stroke"
        )


class TraceError(StrokelineError):
    """Errors related to trace file loading or saving."""

    pass


class TraceLoadError(TraceError):
    """Error loading a trace file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load trace '{path}': {reason}")


class TraceSaveError(TraceError):
    """Error saving a smoothing result."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save result '{path}': {reason}")


class TraceFormatError(TraceError):
    """Unsupported or malformed trace file."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid trace format '{path}': {details}")
