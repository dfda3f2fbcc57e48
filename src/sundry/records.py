"""Record projection and simple aggregates."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from sundry.arrays import get_field
from sundry.numbers import round_half_up


def get_selected_keys(record: Any, keys: Iterable[str]) -> dict[str, Any]:
    """Project ``record`` onto ``keys``; missing fields map to ``None``."""
    return {key: get_field(record, key) for key in keys}


def filter_selected_keys(records: Iterable[Any], keys: Sequence[str]) -> list[dict[str, Any]]:
    """Apply :func:`get_selected_keys` to every record."""
    return [get_selected_keys(record, keys) for record in records]


def get_average_by(
    records: Sequence[Any] | None, key: str, fractional_digits: int = 2
) -> float:
    """Return the mean of field ``key`` across ``records``.

    Args:
        records: Records to average; ``None`` or empty yields ``0``.
        key: Numeric field to average. Missing or ``None`` values count as 0.
        fractional_digits: Number of decimal places to round to.

    Returns:
        float: The mean, rounded with ties away from zero (``0.125`` -> ``0.13``).
    """
    if not records:
        return 0
    total = sum(get_field(record, key) or 0 for record in records)
    mean = total / len(records)
    if not math.isfinite(mean):
        return mean
    return float(round_half_up(mean, fractional_digits))


def get_number_array(n: int) -> list[int]:
    """Return ``[1, 2, ..., n]`` (empty when ``n <= 0``)."""
    return list(range(1, n + 1))
