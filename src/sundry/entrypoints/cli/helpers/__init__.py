"""CLI helpers for SUNDRY.

Logger-level option parsing and stderr message emitters with emoji→ASCII
fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, reporting_errors, warn

__all__ = ["parse_log_level", "error", "reporting_errors", "warn"]
