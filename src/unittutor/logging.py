"""Logging setup for the UNITTUTOR CLI.

Two handlers hang off the root logger:

- a Rich console handler on **stderr**, leaving stdout to the command's own
  output (findings, JSON reports, tables of contents);
- a "flight recorder": an in-memory buffer that keeps the recent history at
  DEBUG and writes it to a log file when something goes wrong, so a failed
  ``docs check`` can be diagnosed after the fact even without ``-vv``.

Library modules only ever call ``logging.getLogger(__name__)``; everything
here is wired up by the CLI entry point.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Iterator
    from logging import Logger

PROJECT_PREFIX = "unittutor"

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)
CONSOLE_FORMAT = "%(prefix)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag console records from other libraries with their top-level package.

    A record from ``markdown_it.rules_block`` is shown as ``[markdown_it] ...``;
    records from this project get an empty prefix. Never drops a record.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        """Set ``record.prefix`` and let the record through.

        Args:
            record: The record about to be formatted by the console handler.

        Returns:
            bool: Always True.
        """
        top_level = record.name.partition(".")[0]
        record.prefix = "" if top_level == self.project else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; ignored in debug mode, which shows everything.
        debug_mode: Show timestamps, logger names and clickable source locations.
        color: False mirrors ``--no-color`` and disables Rich's colour output.

    Returns:
        RichHandler: Handler ready to be attached to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to ``path``.

    Up to ``capacity`` records are held in memory. A record at ``flush_level``
    or above (or closing the handler, when ``flush_on_close`` is set) writes
    the buffer out.

    Args:
        path: Log file the buffer is written to.
        capacity: Number of records kept in memory; a full buffer is written
            out as well.
        flush_level: Level at or above which the buffer is written out.
        flush_on_close: Also write the buffer when the handler is closed (the
            CLI's ``--force-flush``).

    Returns:
        MemoryHandler: Buffering handler whose target is a ``FileHandler``.

    Note:
        ``path`` is truncated on the first write of each run and is not
        created at all when nothing is ever flushed, so a clean
        ``docs check`` leaves the previous run's log untouched.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def _diagnostics(
    handlers: list[logging.Handler], logger_levels: dict[str, int]
) -> Iterator[tuple[str, object]]:
    """Yield (label, value) pairs describing the interpreter and logging setup."""
    yield "Python", sys.version.split()[0]
    yield "Platform", f"{platform.system()} {platform.release()}"
    yield "PID", os.getpid()
    yield "CWD", Path.cwd()
    yield "Click", version("click")
    yield "Rich", version("rich")
    yield "Handlers", [type(h).__name__ for h in handlers]
    yield "Per-logger overrides", (
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>"
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
    """Record how this run is set up.

    One INFO line names the version, the console level and whether the flight
    recorder is on. The environment details follow at DEBUG, so they normally
    land only in the flight recorder.

    Args:
        logger: Logger the startup records are emitted on.
        app_version: UNITTUTOR version string.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder file, or None when there is none.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Flight-recorder buffer size, or None when disabled.
        force_flush_fr: Whether the buffer is written on exit.
        logger_levels: Per-logger level overrides from ``-L``.
    """
    logger.info(
        "UNITTUTOR %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    for label, value in _diagnostics(handlers, logger_levels):
        logger.debug("%s: %s", label, value)
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path or "<none>",
            flight_capacity,
            force_flush_fr,
        )
