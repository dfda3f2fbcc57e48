"""SUNDRY arrays CLI: diff, deduplicate and sort JSON record arrays.

Each command reads JSON arrays from files (``-`` for stdin) and writes JSON to
**stdout**. Warnings about the input go to **stderr**.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any

import click
import click_extra as clickx

from sundry.arrays import get_detailed_array_diff, get_field, sort_by, unique_by

from .helpers import warn

logger = logging.getLogger(__name__)

_MISSING = object()


def _load_array(stream: IO[str], param_hint: str) -> list[Any]:
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON ({e.msg})", param_hint=param_hint) from e
    if not isinstance(data, list):
        raise click.BadParameter("expected a JSON array", param_hint=param_hint)
    return data


def _warn_missing_key(records: list[Any], key: str | None) -> None:
    if key is None:
        return
    missing = sum(1 for record in records if get_field(record, key, _MISSING) is _MISSING)
    if missing:
        warn(f"{missing} record(s) have no {key!r} field; they share one identity.")


def _dump(value: Any) -> None:
    click.echo(json.dumps(value, indent=2, default=str))


@click.group(cls=clickx.ExtraGroup)
def arrays() -> None:
    """Compare and reshape JSON record arrays."""


@arrays.command()
@click.argument("old_file", type=click.File("r", encoding="utf-8"))
@click.argument("new_file", type=click.File("r", encoding="utf-8"))
@click.option("--key", "-k", default=None, help="Identity field of the records.")
def diff(old_file: IO[str], new_file: IO[str], key: str | None) -> None:
    """Show records added, removed and updated between OLD_FILE and NEW_FILE."""
    old = _load_array(old_file, "OLD_FILE")
    new = _load_array(new_file, "NEW_FILE")
    if key is None:
        logger.info("No --key given; records are matched by whole value")
    _warn_missing_key(old + new, key)
    _dump(get_detailed_array_diff(old, new, key).as_dict())


@arrays.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option("--key", "-k", required=True, help="Field whose values must be unique.")
def unique(file: IO[str], key: str) -> None:
    """Keep the last record for each distinct value of --key."""
    records = _load_array(file, "FILE")
    _warn_missing_key(records, key)
    _dump(unique_by(records, key))


@arrays.command("sort")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option("--key", "-k", required=True, help="Field to sort on.")
@click.option("--descending/--ascending", default=False, help="Sort direction.")
def sort_records(file: IO[str], key: str, descending: bool) -> None:
    """Sort records by --key; records without a value come last."""
    records = _load_array(file, "FILE")
    _dump(sort_by(records, key, descending=descending, shallow_clone=True))
