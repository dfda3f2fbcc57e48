"""Entrypoints (inbound adapters) for SUNDRY.

Expose the helpers to the outside world. The command-line interface parses
and validates arguments, calls the library functions, and presents results.
"""
