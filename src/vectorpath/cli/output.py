"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from vectorpath.core import ContourReport
from vectorpath.domain import Direction, Rect
from vectorpath.utils import InspectionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_DIRECTION_LABELS = {
    Direction.CLOCKWISE: "[cyan]CW[/cyan]",
    Direction.COUNTER_CLOCKWISE: "[magenta]CCW[/magenta]",
    Direction.UNDEFINED: "[dim]-[/dim]",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Vectorpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def format_direction(direction: Direction | None) -> str:
    """Format a direction as a short colored label."""
    if direction is None:
        return ""
    return _DIRECTION_LABELS[direction]


def format_bounds(bounds: Rect, precision: int) -> str:
    """Format bounds as 'min_x,min_y → max_x,max_y'."""
    min_x, min_y, max_x, max_y = bounds.to_tuple()
    return (
        f"{min_x:.{precision}f},{min_y:.{precision}f} → "
        f"{max_x:.{precision}f},{max_y:.{precision}f}"
    )


def build_contour_table(
    reports: list[ContourReport],
    precision: int,
    show_reversed: bool,
    max_rows: int,
) -> Table:
    """Build a table with one row per contour.

    Args:
        reports: Contour reports to show
        precision: Decimal places for coordinates
        show_reversed: Add a column with the reversed direction
        max_rows: Maximum number of rows

    Returns:
        Rich Table ready to print
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Glyph")
    table.add_column("#", justify="right")
    table.add_column("Cmds", justify="right")
    table.add_column("Bounds")
    table.add_column("Dir")
    if show_reversed:
        table.add_column("Reversed")

    for report in reports[:max_rows]:
        row = [
            report.glyph_name,
            str(report.contour_idx),
            str(report.command_count),
            format_bounds(report.bounds, precision),
            format_direction(report.direction),
        ]
        if show_reversed:
            row.append(format_direction(report.reversed_direction))
        table.add_row(*row)

    return table


def print_contours(
    reports: list[ContourReport],
    precision: int,
    show_reversed: bool,
    max_rows: int,
) -> None:
    """Print the contour table, noting rows left out."""
    console.print(build_contour_table(reports, precision, show_reversed, max_rows))
    if len(reports) > max_rows:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(reports) - max_rows} more)")


def print_summary(stats: InspectionStats) -> None:
    """Print summary of an inspection run.

    Args:
        stats: Statistics collected during the run
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    console.print(
        f"  {stats.glyph_count} glyphs {SYM_DOT} {stats.contour_count} contours"
    )
    console.print(
        f"  {stats.clockwise_count} CW {SYM_DOT} "
        f"{stats.counter_clockwise_count} CCW {SYM_DOT} "
        f"{stats.undefined_count} undefined"
    )
    if stats.error_count:
        console.print(f"  [red]{stats.error_count} errors[/red]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
