"""Lenient number parsing and numeric text formatting.

The parsers read a leading number from free-form text (``"12px"`` -> 12) and
fall back to ``0`` for anything unusable, including an explicit zero.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

NOT_A_NUMBER = "--"  # pragma: no mutate

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def false_safe_parse_int(value: str | None) -> int:
    """Parse the leading integer of ``value``, or return 0.

    Examples:
        >>> false_safe_parse_int("42 items")
        42
        >>> false_safe_parse_int("n/a")
        0
    """
    if not value or not isinstance(value, str):
        return 0
    if (match := _INT_PREFIX.match(value)) is None:
        return 0
    return int(match.group(1))


def false_safe_parse_float(value: str | None) -> float:
    """Parse the leading decimal number of ``value``, or return 0."""
    if not value or not isinstance(value, str):
        return 0
    if (match := _FLOAT_PREFIX.match(value)) is None:
        return 0
    return float(match.group(1)) or 0


def round_half_up(value: float, digits: int) -> Decimal:
    """Round the exact binary value of ``value`` to ``digits`` decimals.

    Ties go away from zero, matching JavaScript's ``Number.prototype.toFixed``:
    ``0.125`` becomes ``0.13`` while ``1.005`` (stored as 1.00499...) becomes
    ``1.00``.
    """
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def number_to_text(value: int | float) -> str:
    """Render a number the way a user expects to read it.

    Integral floats drop their ``.0``; infinities read ``Infinity``.
    """
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def to_fixed_if_decimal(value: int | float, precision: int = 2) -> str:
    """Format ``value`` with ``precision`` decimals only when it has a fraction.

    Args:
        value: Number to format.
        precision: Decimal places for fractional values.

    Returns:
        str: ``"5"`` for ``5.0``, ``"2.50"`` for ``2.5``, ``"3"`` for
        ``2.999`` (rounding landed on an integer), ``"--"`` for NaN or
        non-numeric input.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return NOT_A_NUMBER
    if math.isnan(value):
        return NOT_A_NUMBER
    if isinstance(value, float) and math.isfinite(value) and not value.is_integer():
        fixed = round_half_up(value, precision)
        if fixed == fixed.to_integral_value():
            return str(int(fixed))
        return f"{fixed:f}"
    return number_to_text(value)
