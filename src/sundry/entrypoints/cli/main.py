"""SUNDRY CLI entry point.

Defines the top-level ``sundry`` command (via Click-Extra) and registers the
subcommand groups.

Currently available groups
- ``sundry dates``: end dates, interval text, relative dates, interval checks.
- ``sundry arrays``: diff, deduplicate and sort JSON record arrays.

Examples
    $ sundry dates end-date 2024-01-01 2 --unit weeks
    $ sundry arrays diff old.json new.json --key id
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from sundry import __version__
from sundry.logging import config_console_handler, config_flight_recorder, log_startup

from .arrays import arrays as arrays_group
from .dates import dates as dates_group
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SUNDRY command-line interface.

    Small, stateless helpers for dates, record arrays and display values,
    usable from shell scripts. Results go to stdout; diagnostics go to stderr.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (source paths and timestamps on every log line).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight-recorder log file.",
    default=Path(user_log_dir("sundry", appauthor=False)) / "latest.log",
    envvar="SUNDRY_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path "
        "when a WARNING or ERROR occurs (or on exit with --force-flush)."
    ),
    default=False,
    envvar="SUNDRY_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Write the flight-recorder buffer to --log-path on exit.",
    default=False,
    envvar="SUNDRY_FORCE_FLUSH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable, "
        "or via SUNDRY_LOGGER_LEVELS (comma/space list)."
    ),
    default=("asyncio=WARNING",),
    envvar="SUNDRY_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def sundry(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """SUNDRY command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(path=log_path, flush_on_close=force_flush)
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        log_path=log_path if flight_recorder else None,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


sundry.add_command(dates_group)
sundry.add_command(arrays_group)
