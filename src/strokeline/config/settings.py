"""Configuration settings for Strokeline."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TOLERANCE = 3.0


class SimplifierConfig(BaseModel):
    """Configuration for the corridor simplifier.

    The tolerance is the only tunable of the engine. It is fixed for the
    lifetime of a smoother instance, so one stroke is always simplified
    against a single corridor width.
    """

    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        ge=0.0,
        allow_inf_nan=False,
        description="Corridor half-width: max distance of a dropped point from the tangent line",
    )

    @property
    def tolerance_squared(self) -> float:
        """Squared tolerance, compared against squared distances."""
        return self.tolerance * self.tolerance


class StreamConfig(BaseModel):
    """Configuration for replaying recorded traces through the engine."""

    chunk_size: int = Field(
        default=16,
        ge=1,
        description="Number of samples delivered per on_chunk call",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class StrokelineSettings(BaseModel):
    """Main application settings."""

    simplifier: SimplifierConfig = Field(default_factory=SimplifierConfig)
    stream: StreamConfig = Field(default_factory=StreamConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokelineSettings:
    """Get default application settings."""
    return StrokelineSettings()
