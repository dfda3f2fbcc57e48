"""Display-value formatting for table cells and labels."""

from __future__ import annotations

import math
from datetime import date
from typing import Literal

from sundry.dates import INVALID_DATE, format_display_date, to_datetime
from sundry.errors import InvalidDateError
from sundry.numbers import number_to_text

PLACEHOLDER = "---"  # pragma: no mutate

DisplayKind = Literal["string", "date"]


def get_display_value(
    value: str | int | float | date | None, kind: DisplayKind = "string"
) -> str:
    """Return ``value`` as text suitable for display.

    Args:
        value: The raw value. ``0`` is shown; ``None`` and ``""`` are not.
        kind: ``"date"`` renders truthy values as ``dd MMM, yyyy``; numbers
            are read as epoch milliseconds.

    Returns:
        str: The display text, ``"---"`` for empty values, or
        ``"Invalid date"`` when a date cannot be read.

    Examples:
        >>> get_display_value(0)
        '0'
        >>> get_display_value("2024-03-05", "date")
        '05 Mar, 2024'
    """
    if kind == "date" and value:
        try:
            return format_display_date(to_datetime(value))
        except InvalidDateError:
            return INVALID_DATE

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return PLACEHOLDER if math.isnan(value) else number_to_text(value)
    if value:
        return str(value)
    return PLACEHOLDER
