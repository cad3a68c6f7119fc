"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

import math

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from strokeline.domain import SmoothingResult, TracePointClass

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

CLASS_STYLES = {
    TracePointClass.NORMAL: "dim",
    TracePointClass.INFLECTION: "yellow",
    TracePointClass.SHARP_EDGE: "bold red",
}


def create_progress() -> Progress:
    """Create a rich progress bar for chunk replay.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Strokeline[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_trace_info(trace_path: str, trace_format: str, sample_count: int) -> None:
    """Print trace information.

    Args:
        trace_path: Path to the trace file
        trace_format: Trace file format (e.g., "JSON", "CSV")
        sample_count: Number of samples in the trace
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(trace_path)
    line.append(f" ({trace_format})")
    console.print(line)
    console.print(f"  {sample_count:,} samples")


def print_replay_info(chunk_size: int, tolerance: float) -> None:
    """Print replay configuration.

    Args:
        chunk_size: Samples delivered per chunk
        tolerance: Corridor tolerance
    """
    console.print(f"  {chunk_size} samples per chunk {SYM_DOT} tolerance {tolerance:g}")


def format_curvature(value: float) -> str:
    """Format a curvature value, showing uncomputed values as a dash."""
    if math.isnan(value):
        return "–"
    return f"{value:.4g}"


def format_curvature_window(begin: int, values: list[float]) -> str:
    """Format a run of curvature values for display.

    Args:
        begin: Index of the first value
        values: Curvature values in index order

    Returns:
        String like ``Curv(3..5)=[0.5, 2.828, -0.5]``
    """
    if not values:
        return "Curv()=[]"
    end = begin + len(values) - 1
    joined = ", ".join(format_curvature(v) for v in values)
    return f"Curv({begin}..{end})=[{joined}]"


def print_points_table(result: SmoothingResult, critical_only: bool = False) -> None:
    """Print per-point classification as a table.

    Args:
        result: Smoothing result to show
        critical_only: Only list inflection and sharp edge points
    """
    kept = {b.index: b for b in result.breakpoints}

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("  #", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("curvature", justify="right")
    table.add_column("class")
    table.add_column("kept")

    for point in result.analytics.points:
        if critical_only and not point.point_class.is_critical:
            continue
        sample = result.original_trace[point.index]
        breakpoint_ = kept.get(point.index)
        style = CLASS_STYLES[point.point_class]
        label = point.point_class.value.replace("_", " ")
        if point.forced:
            label += " (forced)"
        table.add_row(
            f"  {point.index}",
            f"{sample.point.x:g}",
            f"{sample.point.y:g}",
            format_curvature(point.curvature),
            f"[{style}]{label}[/{style}]",
            breakpoint_.reason.value.replace("_", " ") if breakpoint_ else "",
        )

    console.print()
    console.print(table)


def print_critical_points(result: SmoothingResult) -> None:
    """Print each critical point with the curvatures around it.

    Args:
        result: Smoothing result to show
    """
    analytics = result.analytics
    for index in analytics.critical_indices():
        begin = max(index - 1, 0)
        end = min(index + 1, len(analytics) - 1)
        window = [analytics.curvature_at(i) for i in range(begin, end + 1)]
        point_class = analytics.point_class_at(index)
        style = CLASS_STYLES[point_class]
        console.print(
            f"  {index:>5} [{style}]{point_class.value.replace('_', ' '):<11}[/{style}] "
            f"{format_curvature_window(begin, window)}"
        )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    points: int,
    breakpoints: int,
    inflections: int,
    sharp_edges: int,
    corridor_breaks: int,
    chunks: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        points: Number of input samples
        breakpoints: Number of breakpoints kept
        inflections: Number of inflection points
        sharp_edges: Number of sharp edge points
        corridor_breaks: Number of breakpoints caused by the corridor
        chunks: Number of chunks delivered
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    reduction = 100.0 * (1.0 - breakpoints / points) if points else 0.0
    console.print(
        f"  {points} points {SYM_DOT} {breakpoints} kept {SYM_DOT} "
        f"{reduction:.0f}% dropped {SYM_DOT} {chunks} chunks"
    )
    console.print(
        f"  {inflections} inflections {SYM_DOT} {sharp_edges} sharp edges {SYM_DOT} "
        f"{corridor_breaks} corridor breaks"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
