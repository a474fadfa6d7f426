"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, fixtures to register it, a CliRunner, an isolated filesystem, and
an in-memory park wired through `bootstrap` for the park commands.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from dinopark.adapters.unit_of_work import InMemoryUnitOfWork
from dinopark.bootstrap import bootstrap
from dinopark.entrypoints.cli.main import dinopark

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'dinopark.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("dinopark.demo")
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
    """Remove a command from a Click group and any sections click-extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `dinopark` for the duration of a test."""
    dinopark.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(dinopark, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side-effects of a test to a temporary directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def park(runner, fs):
    """Invoke `dinopark` against one in-memory park shared by the whole test.

    Returns a callable taking the CLI arguments; the flight recorder is
    disabled so nothing is written outside the isolated filesystem.
    """
    app = bootstrap(uow=InMemoryUnitOfWork())

    def _invoke(*args: str, **kwargs):
        return runner.invoke(
            dinopark, ["--no-flight-recorder", *args], obj=app, **kwargs
        )

    _invoke.app = app
    return _invoke
