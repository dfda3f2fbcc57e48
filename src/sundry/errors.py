"""Error definitions for SUNDRY.

Parsing helpers raise these when handed input they cannot interpret.
Formatting helpers never raise; they return sentinel strings instead.
"""


class SundryError(Exception):
    """Base class for SUNDRY errors."""


class InvalidDateError(SundryError, ValueError):
    """Raised when a value cannot be interpreted as a date."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


class InvalidTimeError(SundryError, ValueError):
    """Raised when a value cannot be interpreted as a time of day."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid time: {value!r}")
        self.value = value
