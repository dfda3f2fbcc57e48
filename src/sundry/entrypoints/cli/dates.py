"""SUNDRY dates CLI: date arithmetic and formatting from the shell.

Results go to **stdout**; errors go to **stderr** with exit status 1.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

import click
import click_extra as clickx

from sundry.dates import (
    DurationType,
    get_end_date,
    get_interval_text,
    get_relative_date,
    is_within_min_max_interval_date,
)

from .helpers import reporting_errors

logger = logging.getLogger(__name__)


def _iso(value: date) -> str:
    """ISO text of ``value``, dropping a midnight time component."""
    if isinstance(value, datetime) and value.time() == datetime.min.time():
        return value.date().isoformat()
    return value.isoformat()


@click.group(cls=clickx.ExtraGroup)
def dates() -> None:
    """Date arithmetic and formatting."""


@dates.command("end-date")
@click.argument("start")
@click.argument("duration", type=int)
@click.option(
    "--unit",
    "-u",
    type=click.Choice([unit.value for unit in DurationType], case_sensitive=False),
    default=DurationType.DAYS.value,
    show_default=True,
    help="Unit of DURATION.",
)
def end_date(start: str, duration: int, unit: str) -> None:
    """Print the last day of a DURATION-long span starting on START."""
    with reporting_errors():
        result = get_end_date(unit.lower(), duration, start)
    logger.debug("end-date %s + %d %s -> %s", start, duration, unit, result)
    click.echo(_iso(result))


@dates.command()
@click.argument("start")
@click.argument("end")
def interval(start: str, end: str) -> None:
    """Print the inclusive span from START to END in weeks and days."""
    with reporting_errors():
        click.echo(get_interval_text(start, end))


@dates.command()
@click.argument("value")
def relative(value: str) -> None:
    """Print VALUE relative to today ("Today, 2:05 PM", ...)."""
    click.echo(get_relative_date(value))


@dates.command()
@click.argument("value")
@click.option("--start", "-s", default=None, help="First day of the interval.")
@click.option("--end", "-e", default=None, help="Last day of the interval.")
@click.pass_context
def within(ctx: click.Context, value: str, start: str | None, end: str | None) -> None:
    """Check whether VALUE falls on or between --start and --end.

    Prints "true" or "false"; the exit status is 0 when inside, 1 otherwise.
    """
    with reporting_errors():
        inside = is_within_min_max_interval_date(value, start, end)
    click.echo("true" if inside else "false")
    ctx.exit(0 if inside else 1)
