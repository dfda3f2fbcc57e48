"""Logging helpers used by the SUNDRY CLI.

Console output goes through Rich; an optional in-memory "flight recorder"
buffers DEBUG records and dumps them to a file when something goes wrong.
Records from loggers outside the ``sundry`` namespace get a short bracketed
prefix so they stand out on the console.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "sundry"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[pkg]"`` for non-SUNDRY loggers.

    Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # "asyncio.events" -> "[asyncio]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug mode).
        debug_mode: Show source paths and timestamps instead of the short prefix.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
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
        "%(asctime)s %(name)s: %(message)s"
        if debug_mode
        else "%(prefix)s %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 500,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory flight recorder that flushes into ``path``.

    Up to ``capacity`` records are buffered; the buffer is written out when a
    record at ``flush_level`` or above arrives, or on close when
    ``flush_on_close`` is set.

    Args:
        path: Destination file (truncated on open).
        capacity: Number of records kept in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: Memory-backed handler with a FileHandler target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the version, console level and recorder target, then the level overrides."""
    logger.info(
        "SUNDRY %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        log_path or "OFF",
    )
    overrides = ", ".join(
        f"{name}={logging.getLevelName(lvl)}" for name, lvl in sorted(logger_levels.items())
    )
    logger.debug("Logger levels: %s", overrides or "defaults")
