"""CLI application entry point for vectorpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from vectorpath import __version__
from vectorpath.cli.output import (
    console,
    print_contours,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_summary,
)
from vectorpath.config import (
    LogLevel,
    LoggingConfig,
    OutputConfig,
    ReaderConfig,
    VectorPathSettings,
)
from vectorpath.core import PathInspector
from vectorpath.exceptions import FontLoadError, GlyphNotFoundError, VectorPathError
from vectorpath.io import FontReader
from vectorpath.utils import InspectionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="vectorpath",
    help="Report bounds and winding direction of glyph contours as vector paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Vectorpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def inspect(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    glyphs: Annotated[
        list[str] | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Glyph name to inspect (repeatable, default: all glyphs)",
        ),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option(
            "--reverse",
            "-r",
            help="Also show the direction of each reversed contour",
        ),
    ] = False,
    normalize: Annotated[
        bool,
        typer.Option(
            "--normalize/--no-normalize",
            help="Reverse CFF contours to the TrueType winding convention",
        ),
    ] = True,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places for coordinates (0-6)",
            min=0,
            max=6,
        ),
    ] = 1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show every contour instead of the summary only",
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
    """Inspect the contours of a font as vector paths.

    Every contour is read as a path; its bounds and winding direction are
    reported. Selecting glyphs with --glyph shows their contours in a table.

    Example:
        vectorpath Roboto-Regular.ttf -g O -g A --reverse
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input file not found: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    settings = VectorPathSettings(
        reader=ReaderConfig(normalize_winding=normalize),
        output=OutputConfig(precision=precision, show_reversed=reverse),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )
    inspector = PathInspector(settings, InspectionLogger(logger))

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        with FontReader(input_font, settings.reader) as reader:
            if not quiet:
                print_font_info(
                    font_path=str(input_font),
                    font_type=reader.format,
                    glyph_count=reader.glyph_count,
                    upm=reader.units_per_em,
                )
                print_step("Inspecting contours")

            reports = inspector.inspect_font(reader, glyphs or None)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except VectorPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        if glyphs or verbose:
            print_contours(
                reports,
                precision=settings.output.precision,
                show_reversed=settings.output.show_reversed,
                max_rows=settings.output.max_rows,
            )
        print_summary(inspector.stats)

    if inspector.stats.error_count:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
