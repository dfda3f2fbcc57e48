"""SUNDRY

Stateless helpers for web front-end style data handling: date arithmetic and
formatting, record/array set operations and snapshot diffs, lenient number
parsing and display-value formatting, plus small wrappers around host
capabilities such as media-device enumeration and permission queries.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
