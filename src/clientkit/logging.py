"""Logging helpers used by the CLIENTKIT CLI and library.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk on flush. It also provides a filter that annotates third-party
log records with a short prefix used by console formatting, level-name
normalization, and a pair of styled debugging helpers (``log`` and
``taplog``) for inspecting values mid-pipeline.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Callable
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from textwrap import indent
from typing import TYPE_CHECKING, Any, Literal, TypeAlias, TypeVar

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.pretty import pretty_repr
from rich.text import Text

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "clientkit"
DEFAULT_LEVEL_NAME = "info"

# Level names accepted from users, mapped onto stdlib logging levels.
LEVEL_NAMES: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}

T = TypeVar("T")


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach a prefix to the record and allow it through.

        Args:
            record: The LogRecord being processed.

        Returns:
            bool: Always True (record is not filtered out).
        """
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def normalize_log_level(level: Any) -> str:
    """Trim and lower-case a level name, falling back to ``"info"``.

    Args:
        level: A user-supplied level name (e.g. ``" WARN "``).

    Returns:
        str: One of ``trace``, ``debug``, ``info``, ``warn``, ``error``,
        ``fatal`` (or the stdlib spellings ``warning``/``critical``);
        ``"info"`` for anything unrecognized.
    """
    if not isinstance(level, str):
        return DEFAULT_LEVEL_NAME
    name = level.strip().lower()
    return name if name in LEVEL_NAMES else DEFAULT_LEVEL_NAME


def level_number(level: str) -> int | None:
    """Return the stdlib logging level for a level name, or None if it is not one.

    Accepts the stdlib names plus the ``trace``, ``warn`` and ``fatal``
    aliases, case-insensitively.
    """
    return LEVEL_NAMES.get(level.strip().lower())


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode the handler is set to DEBUG and includes source
    file/line information; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # Keep in line with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The flight recorder buffers up to `capacity` log records and flushes
    them to the provided file when a record at `flush_level` or higher is
    emitted (or on close if `flush_on_close` is True). The file is opened
    lazily, so nothing is written unless a flush actually happens.

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"  # pylint: disable=line-too-long
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary plus DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        flight_recorder: Whether the in-memory flight recorder is enabled.
        flight_capacity: Configured capacity of the flight recorder buffer, or None.
        force_flush_fr: Whether the flight recorder is configured to flush on close.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """
    logger.info(
        "CLIENTKIT %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s, Rich: %s", version("click"), version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )


# ============================================================================
#                           Styled value inspection
# ============================================================================


def log(caption: str, message: Any, console: Console | None = None) -> None:
    """Print a captioned, colorized block describing ``message`` to stderr.

    Example output::

        ---------------------
          This is a caption:
          {'detail': 'boom'}
        ---------------------

    Args:
        caption: A caption for the logged value.
        message: Any value; it is pretty-printed.
        console: Console to print to (defaults to a stderr console).
    """
    console = console or Console(stderr=True)
    rule = Text("-" * (len(caption) + 4), style="bold white")
    console.print(rule)
    console.print(f"  [bold yellow]{escape(caption)}[/]")
    console.print(Text(indent(pretty_repr(message), "  "), style="bold red"))
    console.print(rule)


def taplog(
    caption: str,
    predicate: Callable[[T], Any] | None = None,
    console: Console | None = None,
) -> Callable[[T], T]:
    """Create a pass-through function that logs (a view of) each value it receives.

    Drop it into any chain of calls to see what flows through without
    changing it. ``predicate`` picks what to show (the value itself by
    default); the value is always returned unaltered.

    Examples:
        >>> show_status = taplog("status", lambda res: res["status"])
        >>> show_status({"status": 404})["status"]  # logs "404", returns the input
        404
    """

    def _tap(value: T) -> T:
        log(caption, value if predicate is None else predicate(value), console)
        return value

    return _tap
