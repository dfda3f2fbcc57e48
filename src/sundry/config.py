"""Configuration utilities for SUNDRY.

This module centralizes small helpers and constants related to runtime configuration.
"""

import logging
import os
from typing import Any

ENV_VAR = "SUNDRY_ENV"  # pragma: no mutate
DEFAULT_ENVIRONMENT = "production"  # pragma: no mutate
DEVELOPMENT = "development"  # pragma: no mutate

dev_logger = logging.getLogger("sundry.dev")


def get_environment() -> str:
    """Get the runtime environment name.

    Returns:
        The lower-cased value of the `SUNDRY_ENV` environment variable, or
        ``"production"`` when it is unset or empty.
    """
    if not (env := os.environ.get(ENV_VAR, "").strip()):
        return DEFAULT_ENVIRONMENT
    return env.lower()


def is_development() -> bool:
    """Return True when running with ``SUNDRY_ENV=development``."""
    return get_environment() == DEVELOPMENT


def log_dev(data: Any) -> None:
    """Log ``data`` on the ``sundry.dev`` logger, in development only.

    Args:
        data: Any value; it is rendered with ``%s``.
    """
    if is_development():
        dev_logger.info("%s", data)
