"""End-to-end tests for `sundry dates`."""

import pytest

from sundry.entrypoints.cli.main import sundry

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["2024-01-01", "10"], "2024-01-10"),
        (["2024-01-01", "2", "--unit", "weeks"], "2024-01-14"),
        (["2024-01-31", "1", "-u", "months"], "2024-02-28"),
        (["2024-01-01", "1", "--unit", "YEAR"], "2024-12-31"),
        (["2024-01-01T08:30:00", "1"], "2024-01-01T08:30:00"),
    ],
)
def test_end_date(runner, args, expected):
    """end-date prints the inclusive end of the span."""
    result = runner.invoke(sundry, ["dates", "end-date", *args])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_end_date_invalid_start(runner):
    """Unreadable dates are reported on stderr with exit status 1."""
    result = runner.invoke(sundry, ["dates", "end-date", "someday", "3"])
    assert result.exit_code == 1
    assert "Invalid date: 'someday'" in result.stderr
    assert result.stdout == ""


def test_interval(runner):
    """interval prints the week/day text."""
    result = runner.invoke(sundry, ["dates", "interval", "2024-01-01", "2024-01-17"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2 weeks, 3 days"


def test_relative_invalid(runner):
    """relative reports unreadable input as text, not as an error."""
    result = runner.invoke(sundry, ["dates", "relative", "garbage"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Invalid date"


def test_relative_old_date(runner):
    """Old dates are shown in full."""
    result = runner.invoke(sundry, ["dates", "relative", "2001-02-03T16:04:00"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "3 Feb 2001, 4:04 PM"


@pytest.mark.parametrize(
    ("value", "expected_output", "expected_code"),
    [("2024-01-15", "true", 0), ("2024-02-01", "false", 1)],
)
def test_within(runner, value, expected_output, expected_code):
    """within prints the answer and reflects it in the exit status."""
    result = runner.invoke(
        sundry,
        ["dates", "within", value, "--start", "2024-01-01", "--end", "2024-01-31"],
    )
    assert result.exit_code == expected_code
    assert result.stdout.strip() == expected_output
