"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, plus fixtures to register it, obtain a CliRunner, and run tests inside
an isolated filesystem.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from sundry.entrypoints.cli.main import sundry

# pylint: disable=redefined-outer-name

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=unused-argument
) -> None:
    """Mark every item collected here as `e2e`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            item.add_marker(pytest.mark.e2e)


@click.command()
def log_demo():
    """Emit representative log messages on a project and a third-party logger."""
    logger = logging.getLogger("sundry.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    sundry.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(sundry, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated temporary directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def write_json(fs):  # pylint: disable=unused-argument
    """Return a helper writing a JSON document into the isolated directory."""

    def _write(name: str, data) -> str:
        Path(name).write_text(json.dumps(data), encoding="utf-8")
        return name

    return _write
