"""Trailing-call debouncing on the asyncio event loop.

A :class:`Debouncer` wraps a callable. Each call cancels the previously
scheduled invocation (if any) and schedules a new one ``wait_ms`` later, so a
burst of calls collapses into a single trailing call with the last arguments.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_WAIT_MS = 300


class Debouncer:
    """Callable wrapper that delays and coalesces calls to ``fn``.

    Args:
        fn: Function to run after the quiet period.
        wait_ms: Quiet period in milliseconds.
        loop: Event loop to schedule on. Defaults to the running loop at the
            time of each call.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait_ms: float = DEFAULT_WAIT_MS,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if wait_ms < 0:
            raise ValueError("wait_ms must be non-negative")
        self._fn = fn
        self._wait = wait_ms / 1000
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._pending_args: tuple[tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def pending(self) -> bool:
        """True while a trailing call is scheduled."""
        return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._pending_args = (args, kwargs)
        self._handle = loop.call_later(self._wait, self._fire)

    def cancel(self) -> None:
        """Drop the scheduled call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Cancelled pending call to %r", self._fn)
        self._handle = None
        self._pending_args = None

    def flush(self) -> None:
        """Run the scheduled call now instead of waiting."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def _fire(self) -> None:
        args, kwargs = self._pending_args or ((), {})
        self._handle = None
        self._pending_args = None
        self._fn(*args, **kwargs)


def debounce(fn: Callable[..., Any], wait_ms: float = DEFAULT_WAIT_MS) -> Debouncer:
    """Return a :class:`Debouncer` around ``fn``.

    Example:
        ```py
        save = debounce(store.save, wait_ms=500)
        save(draft)  # runs once, 500 ms after the last burst
        ```
    """
    return Debouncer(fn, wait_ms)
