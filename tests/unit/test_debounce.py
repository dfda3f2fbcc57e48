"""Unit tests for sundry.debounce.

The debouncer schedules on the asyncio loop, so each test drives a short
coroutine with ``asyncio.run``.
"""

import asyncio

import pytest

from sundry.debounce import Debouncer, debounce

# pylint: disable=magic-value-comparison

WAIT_MS = 10
SETTLE = 0.05


def test_burst_collapses_to_last_call():
    """Only the last call of a burst runs, with its arguments."""
    calls = []

    async def scenario():
        debounced = debounce(lambda *a, **kw: calls.append((a, kw)), WAIT_MS)
        debounced(1)
        debounced(2)
        debounced(3, flag=True)
        assert calls == []
        await asyncio.sleep(SETTLE)

    asyncio.run(scenario())
    assert calls == [((3,), {"flag": True})]


def test_separate_bursts_each_fire():
    """Calls separated by more than the wait each run."""
    calls = []

    async def scenario():
        debounced = debounce(calls.append, WAIT_MS)
        debounced("a")
        await asyncio.sleep(SETTLE)
        debounced("b")
        await asyncio.sleep(SETTLE)

    asyncio.run(scenario())
    assert calls == ["a", "b"]


def test_pending_and_cancel():
    """cancel drops the scheduled call."""
    calls = []

    async def scenario():
        debounced = Debouncer(calls.append, WAIT_MS)
        assert not debounced.pending
        debounced("x")
        assert debounced.pending
        debounced.cancel()
        assert not debounced.pending
        await asyncio.sleep(SETTLE)

    asyncio.run(scenario())
    assert calls == []


def test_flush_runs_immediately():
    """flush runs the scheduled call right away and only once."""
    calls = []

    async def scenario():
        debounced = Debouncer(calls.append, WAIT_MS)
        debounced("now")
        debounced.flush()
        assert calls == ["now"]
        assert not debounced.pending
        await asyncio.sleep(SETTLE)
        debounced.flush()

    asyncio.run(scenario())
    assert calls == ["now"]


def test_requires_running_loop_without_explicit_loop():
    """Calling outside an event loop without a loop argument is an error."""
    debounced = Debouncer(lambda: None, WAIT_MS)
    with pytest.raises(RuntimeError):
        debounced()


def test_negative_wait_rejected():
    """The wait period cannot be negative."""
    with pytest.raises(ValueError, match="wait_ms must be non-negative"):
        Debouncer(lambda: None, -1)
