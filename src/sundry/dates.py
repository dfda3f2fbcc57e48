"""Date helpers.

Everything here works on naive local datetimes; no time-zone conversion takes
place. Inputs may be :class:`~datetime.date`, :class:`~datetime.datetime`,
ISO-8601 text or milliseconds since the Unix epoch. Time-zone aware values
are converted to local time and made naive first.

Helpers that compute values raise :class:`~sundry.errors.InvalidDateError`
(or :class:`~sundry.errors.InvalidTimeError`) on input they cannot read;
helpers that only produce display text return ``"Invalid date"`` instead.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Iterable
from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta
from enum import Enum
from typing import Any, TypeAlias, TypeVar

from sundry.arrays import get_field
from sundry.errors import InvalidDateError, InvalidTimeError

logger = logging.getLogger(__name__)

DateLike: TypeAlias = date | datetime | str | int | float
D = TypeVar("D", bound=date)
T = TypeVar("T")

INVALID_DATE = "Invalid date"  # pragma: no mutate
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip
ONE_DAY = timedelta(days=1)


class DurationType(str, Enum):
    """Units accepted by :func:`get_end_date`."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEAR = "year"


# ============================================================================
#                               Parsing
# ============================================================================


def to_datetime(value: DateLike) -> datetime:
    """Interpret ``value`` as a naive local datetime.

    Args:
        value: A date (midnight is assumed), a datetime, ISO-8601 text, or
            epoch milliseconds (booleans are rejected).

    Returns:
        datetime: The naive local datetime.

    Raises:
        InvalidDateError: If ``value`` is not a date, not valid ISO-8601 text,
            or a timestamp outside the supported range.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(value) from e
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidDateError(value) from e
    else:
        raise InvalidDateError(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _parse_clock(text: str) -> tuple[int, int, int]:
    """Split ``HH:MM[:SS]`` into validated integer parts."""
    parts = text.strip().split(":")
    if len(parts) not in (2, 3):
        raise InvalidTimeError(text)
    try:
        hours, minutes, seconds = (int(p) for p in [*parts, "0"][:3])
    except ValueError as e:
        raise InvalidTimeError(text) from e
    if not (0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59):
        raise InvalidTimeError(text)
    return hours, minutes, seconds


def format_meridian(moment: datetime | time) -> str:
    """Format as ``h:mm AM`` / ``h:mm PM`` (e.g. ``"2:05 PM"``)."""
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment.hour % 12 or 12}:{moment.minute:02d} {suffix}"


def format_display_date(moment: date) -> str:
    """Format as ``dd MMM, yyyy`` (e.g. ``"05 Mar, 2024"``)."""
    return f"{moment.day:02d} {MONTH_ABBR[moment.month - 1]}, {moment.year:04d}"


# ============================================================================
#                               Arithmetic
# ============================================================================


def add_months(moment: D, months: int) -> D:
    """Shift ``moment`` by whole months, clamping to the last day of the month.

    Raises:
        InvalidDateError: If the result falls outside the supported years.
    """
    index = moment.month - 1 + months
    year, month = moment.year + index // 12, index % 12 + 1
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(moment)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _duration_type(value: DurationType | str) -> DurationType:
    try:
        return DurationType(value)
    except ValueError:
        logger.debug("Unknown duration type %r, counting in days", value)
        return DurationType.DAYS


def get_end_date(
    duration_type: DurationType | str, duration: int, start_date: DateLike
) -> date:
    """Return the inclusive end date of a span starting at ``start_date``.

    The span covers ``duration`` units, so the result is one day before
    ``start_date + duration units``.

    Args:
        duration_type: ``days``, ``weeks``, ``months`` or ``year``. Anything
            else is treated as days.
        duration: Number of units.
        start_date: First day of the span.

    Returns:
        A ``date`` when ``start_date`` is a plain date, otherwise a datetime.

    Raises:
        InvalidDateError: If ``start_date`` cannot be parsed or the end date
            falls outside the supported range.

    Example:
        >>> get_end_date("weeks", 2, date(2024, 1, 1))
        datetime.date(2024, 1, 14)
    """
    start = start_date if isinstance(start_date, date) else to_datetime(start_date)
    try:
        match _duration_type(duration_type):
            case DurationType.WEEKS:
                return start + (timedelta(weeks=duration) - ONE_DAY)
            case DurationType.MONTHS:
                return add_months(start, duration) - ONE_DAY
            case DurationType.YEAR:
                return add_months(start, 12 * duration) - ONE_DAY
            case _:
                return start + (timedelta(days=duration) - ONE_DAY)
    except OverflowError as e:
        raise InvalidDateError(start_date) from e


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def get_interval_text(start_date: DateLike, end_date: DateLike) -> str:
    """Describe the inclusive span between two dates in weeks and days.

    Returns:
        str: ``"2 weeks"``, ``"3 days"``, ``"1 week, 2 days"``; an empty or
        inverted span reads ``"0 weeks, 0 days"``.

    Raises:
        InvalidDateError: If either date cannot be parsed.
    """
    span = to_datetime(end_date) - to_datetime(start_date) + ONE_DAY
    weeks, days = divmod(max(span.days, 0), 7)

    if weeks and not days:
        return _plural(weeks, "week")
    if days and not weeks:
        return _plural(days, "day")
    return f"{_plural(weeks, 'week')}, {_plural(days, 'day')}"


def sort_date(records: Iterable[T], key: str, descending: bool = False) -> list[T]:
    """Return a copy of ``records`` ordered by the date in field ``key``."""
    return sorted(
        records,
        key=lambda record: to_datetime(get_field(record, key)),
        reverse=descending,
    )


def get_date_min_time(value: DateLike) -> datetime:
    """Return the first instant (00:00:00.000000) of the day of ``value``."""
    return to_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def get_date_max_time(value: DateLike) -> datetime:
    """Return the last instant (23:59:59.999999) of the day of ``value``."""
    return to_datetime(value).replace(
        hour=23, minute=59, second=59, microsecond=999_999
    )


def is_within_min_max_interval_date(
    value: DateLike,
    start_date: DateLike | None = None,
    end_date: DateLike | None = None,
) -> bool:
    """Return True if ``value`` falls on or between the two bound days.

    The start bound begins at midnight and the end bound runs to the last
    instant of its day. A missing bound leaves that side open.
    """
    moment = to_datetime(value)
    lower = get_date_min_time(start_date) if start_date else datetime.min
    upper = get_date_max_time(end_date) if end_date else datetime.max
    return lower <= moment <= upper


# ============================================================================
#                           Time-of-day conversion
# ============================================================================


def convert_time_to_date(text: str | None, *, now: datetime | None = None) -> datetime | None:
    """Return today's date at the clock time ``HH:MM[:SS]``.

    Args:
        text: Clock time; empty input returns ``None``.
        now: Reference moment supplying the date (defaults to ``datetime.now()``).

    Raises:
        InvalidTimeError: If ``text`` is not a valid clock time.
    """
    if not text or not isinstance(text, str):
        return None
    hours, minutes, seconds = _parse_clock(text)
    return (now or datetime.now()).replace(
        hour=hours, minute=minutes, second=seconds, microsecond=0
    )


def convert_date_to_time(value: DateLike | None) -> str:
    """Return the ``HH:MM:SS`` clock time of ``value`` (``""`` when empty)."""
    if not value:
        return ""
    return to_datetime(value).strftime("%H:%M:%S")


def convert_time_to_meridian(text: str | None) -> str:
    """Convert ``HH:MM[:SS]`` to ``h:mm AM/PM`` (``""`` when empty)."""
    if not text or not isinstance(text, str):
        return ""
    hours, minutes, seconds = _parse_clock(text)
    return format_meridian(time(hours, minutes, seconds))


def convert_time_12_to_24(text: str) -> str:
    """Convert ``hh:mm[:ss] am|pm`` to ``HH:MM:00``, dropping any seconds.

    Examples:
        >>> convert_time_12_to_24("12:15 am")
        '00:15:00'
        >>> convert_time_12_to_24("2:30 PM")
        '14:30:00'

    Raises:
        InvalidTimeError: If ``text`` is not a 12-hour clock time.
    """
    parts = text.split()
    if len(parts) != 2 or parts[1].lower() not in ("am", "pm"):
        raise InvalidTimeError(text)
    clock, modifier = parts[0], parts[1].lower()
    try:
        hours, minutes, _ = _parse_clock(clock)
    except InvalidTimeError as e:
        raise InvalidTimeError(text) from e
    if not 1 <= hours <= 12:
        raise InvalidTimeError(text)

    if hours == 12:
        hours = 0
    if modifier == "pm":
        hours += 12
    return f"{hours:02d}:{minutes:02d}:00"


def get_relative_date(value: Any, *, now: datetime | None = None) -> str:
    """Describe ``value`` relative to today.

    Returns:
        str: ``"Today, 2:05 PM"``, ``"Yesterday, 9:00 AM"``,
        ``"5 Mar 2024, 2:05 PM"``, or ``"Invalid date"``.
    """
    try:
        moment = to_datetime(value)
    except InvalidDateError:
        return INVALID_DATE

    today = (now or datetime.now()).date()
    clock = format_meridian(moment)
    if moment.date() == today:
        return f"Today, {clock}"
    if moment.date() == today - ONE_DAY:
        return f"Yesterday, {clock}"
    return f"{moment.day} {MONTH_ABBR[moment.month - 1]} {moment.year:04d}, {clock}"
