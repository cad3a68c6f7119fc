"""CLI application entry point for strokeline.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from strokeline import __version__
from strokeline.cli.output import (
    console,
    create_progress,
    print_critical_points,
    print_error,
    print_header,
    print_points_table,
    print_replay_info,
    print_step,
    print_success,
    print_trace_info,
)
from strokeline.config import (
    DEFAULT_TOLERANCE,
    LoggingConfig,
    SimplifierConfig,
    StreamConfig,
    StrokelineSettings,
)
from strokeline.core import InputSmoother
from strokeline.exceptions import (
    StrokelineError,
    TraceFormatError,
    TraceLoadError,
    TraceSaveError,
)
from strokeline.io import TraceReader, TraceWriter
from strokeline.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="strokeline",
    help="Classify and simplify a recorded pen stroke the way a live input pipeline would.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Strokeline[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def simplify(
    input_trace: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON/CSV trace file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-simplified.json)",
        ),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Corridor tolerance in input units",
            min=0.0,
        ),
    ] = DEFAULT_TOLERANCE,
    chunk_size: Annotated[
        int,
        typer.Option(
            "--chunk-size",
            "-c",
            help="Samples delivered per chunk when replaying the trace",
            min=1,
        ),
    ] = 16,
    show_points: Annotated[
        bool,
        typer.Option(
            "--show-points",
            help="Print the classification of every point",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Classify and simplify a recorded stroke.

    The trace is replayed through the streaming engine in chunks, exactly as
    live input would arrive. Every point is classified as normal, inflection
    or sharp edge, and the simplified polyline is written as JSON together
    with per-point analytics.

    Example:
        strokeline stroke.json --tolerance 2.5

    This will create stroke-simplified.json next to the input.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_trace.exists():
        print_error(
            f"Input file not found: {input_trace}",
            details=f"The file '{input_trace}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_trace.is_file():
        print_error(
            f"Input path is not a file: {input_trace}",
            details="Please provide a path to a JSON or CSV trace file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    try:
        settings = StrokelineSettings(
            simplifier=SimplifierConfig(tolerance=tolerance),
            stream=StreamConfig(chunk_size=chunk_size),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        error = e.errors()[0]
        option = ".".join(str(part) for part in error["loc"])
        print_error(f"Invalid {option}: {error['msg']}")
        raise typer.Exit(code=1) from e
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_step("Loading trace")

        reader = TraceReader(input_trace)
        reader.load()

        if not quiet:
            print_trace_info(
                trace_path=str(input_trace),
                trace_format=reader.format,
                sample_count=reader.sample_count,
            )

        if reader.sample_count == 0:
            if not quiet:
                console.print("\nTrace has no samples. Nothing to process.")
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Simplifying")
            print_replay_info(settings.stream.chunk_size, settings.simplifier.tolerance)

        start_time = time.time()
        smoother = InputSmoother.from_config(settings.simplifier, logger=logger)
        chunks = reader.iter_chunks(settings.stream.chunk_size)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Replaying", total=reader.sample_count)
                for chunk in chunks:
                    smoother.on_chunk(chunk)
                    progress.update(task_id, advance=len(chunk))
        else:
            for chunk in chunks:
                smoother.on_chunk(chunk)

        smoother.on_stream_end()
        result = smoother.result()
        stats = smoother.stats
        duration = time.time() - start_time

        if show_points:
            print_points_table(result, critical_only=False)
        elif verbose:
            print_step("Critical points")
            print_critical_points(result)

        output_path = output if output is not None else TraceWriter.get_simplified_path(input_trace)
        TraceWriter(result, output_path).save()

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=duration,
                points=stats.point_count,
                breakpoints=stats.breakpoint_count,
                inflections=stats.inflection_count,
                sharp_edges=stats.sharp_edge_count,
                corridor_breaks=stats.corridor_breaks,
                chunks=stats.chunk_count,
            )

    except TraceFormatError as e:
        print_error(f"Could not read trace: {e.details}")
        raise typer.Exit(code=1)
    except TraceLoadError as e:
        print_error(f"Could not load trace: {e.reason}")
        raise typer.Exit(code=1)
    except TraceSaveError as e:
        print_error(f"Could not save result: {e.reason}")
        raise typer.Exit(code=1)
    except StrokelineError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
