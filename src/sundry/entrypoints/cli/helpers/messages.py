"""Terminal message helpers for the SUNDRY CLI.

Messages go to stderr so stdout stays machine-readable (JSON output of the
``arrays`` commands, for instance).
"""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from sundry.errors import SundryError


def _supports_character(character: str) -> bool:
    """Return True if ``character`` can be encoded on Click's stderr stream."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  3 records have no 'id' field.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Invalid date: '2024-13-01'``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn SUNDRY errors raised inside the block into an error line and exit 1."""
    try:
        yield
    except SundryError as e:
        error(str(e))
        raise click.exceptions.Exit(1) from e
