"""Global pytest fixtures for SUNDRY."""

from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def now() -> datetime:
    """A fixed reference moment: Friday 15 March 2024, 10:30 local time."""
    return datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove SUNDRY_* variables so tests start from the defaults."""
    for name in ("SUNDRY_ENV", "SUNDRY_LOGGER_LEVELS", "SUNDRY_LOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
