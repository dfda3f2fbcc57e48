"""Interfaces (ports) for host capabilities.

The helpers in :mod:`sundry.devices` talk to the host only through the
abstract classes defined here, so they can be exercised without a browser-like
environment. Concrete implementations live in :mod:`sundry.adapters`.
"""
