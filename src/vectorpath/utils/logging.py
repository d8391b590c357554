"""Logging utilities for Vectorpath."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "vectorpath"


@dataclass
class InspectionStats:
    """Statistics from an inspection run."""

    glyph_count: int = 0
    contour_count: int = 0
    clockwise_count: int = 0
    counter_clockwise_count: int = 0
    undefined_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate inspection duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Calling this again replaces the handlers installed by a previous call.

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
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
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

    logger = structlog.get_logger("vectorpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class InspectionLogger:
    """Logger for tracking inspection progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("vectorpath")
        self._stats = InspectionStats()

    def log_run_start(self, font_path: str, glyph_count: int) -> None:
        """Log start of an inspection run."""
        self._stats.start_time = time.perf_counter()
        self._logger.info("Inspection started", font=font_path, glyphs=glyph_count)

    def log_run_complete(self) -> None:
        """Log end of an inspection run."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Inspection complete",
            glyphs=self._stats.glyph_count,
            contours=self._stats.contour_count,
            errors=self._stats.error_count,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    def log_glyph_start(self, glyph_name: str) -> None:
        """Log start of glyph inspection."""
        self._logger.debug("Inspecting glyph", glyph=glyph_name)

    def log_glyph_complete(self, glyph_name: str, contour_count: int) -> None:
        """Log inspected glyph."""
        self._logger.debug("Glyph inspected", glyph=glyph_name, contours=contour_count)
        self._stats.glyph_count += 1

    def log_glyph_skipped(self, glyph_name: str, reason: str) -> None:
        """Log skipped glyph."""
        self._logger.debug("Glyph skipped", glyph=glyph_name, reason=reason)
        self._stats.skipped_count += 1

    def log_glyph_error(
        self,
        glyph_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log glyph inspection error."""
        self._logger.error(
            "Glyph inspection failed",
            glyph=glyph_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((glyph_name, str(error)))

    def log_contour(
        self,
        glyph_name: str,
        contour_idx: int,
        direction: str,
        command_count: int,
    ) -> None:
        """Log contour direction and count it."""
        self._logger.debug(
            "Contour inspected",
            glyph=glyph_name,
            contour_idx=contour_idx,
            direction=direction,
            commands=command_count,
        )
        self._stats.contour_count += 1
        if direction == "CLOCKWISE":
            self._stats.clockwise_count += 1
        elif direction == "COUNTER_CLOCKWISE":
            self._stats.counter_clockwise_count += 1
        else:
            self._stats.undefined_count += 1

    @property
    def stats(self) -> InspectionStats:
        """Get current inspection statistics."""
        return self._stats
