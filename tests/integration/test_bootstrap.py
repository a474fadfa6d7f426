"""Tests for the composition root."""

from collections.abc import Callable

import pytest

from dinopark.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from dinopark.bootstrap import AppContainer, bootstrap
from dinopark.bootstrap.bootstrap import build_message_bus, build_uow, inject_dependencies
from dinopark.config import DB_URL_ENV_VAR, DatabaseUrlNotSetError
from dinopark.service_layer import commands
from dinopark.service_layer.commands import Command

# pylint: disable=unused-argument


def test_build_uow_returns_sql_uow():
    uow = build_uow("sqlite:///:memory:")
    assert isinstance(uow, SqlAlchemyUnitOfWork)
    assert uow.engine.url.get_backend_name() == "sqlite"
    assert uow.engine.url.database == ":memory:"


def test_inject_dependencies_binds_declared_parameters_only():
    seen = {}

    def handler(cmd, uow):
        seen["cmd"], seen["uow"] = cmd, uow

    bound = inject_dependencies(handler, {"uow": "UOW", "clock": "CLOCK"})
    bound("CMD")
    assert seen == {"cmd": "CMD", "uow": "UOW"}


def test_build_message_bus_injects_uow():
    uow = InMemoryUnitOfWork()
    received = []

    def handler(cmd: Command, uow: InMemoryUnitOfWork) -> None:
        received.append(uow)

    handlers: dict[type[Command], Callable[..., None]] = {Command: handler}
    build_message_bus(uow, handlers).handle(Command())
    assert received == [uow]


def test_bootstrap_reads_url_from_environment(monkeypatch, sqlite_url_file):
    monkeypatch.setenv(DB_URL_ENV_VAR, sqlite_url_file)
    app = bootstrap()
    assert isinstance(app, AppContainer)
    assert isinstance(app.message_bus.uow, SqlAlchemyUnitOfWork)

    app.message_bus.handle(commands.AddCage("Pen-1", 2, has_power=True))
    assert app.queries.get_cage("Pen-1").max_occupancy == 2


def test_bootstrap_without_url(monkeypatch):
    monkeypatch.delenv(DB_URL_ENV_VAR, raising=False)
    with pytest.raises(DatabaseUrlNotSetError):
        bootstrap()


def test_bootstrap_with_given_uow_shares_it():
    uow = InMemoryUnitOfWork()
    app = bootstrap(uow=uow)
    assert app.message_bus.uow is uow
    assert app.queries.uow is uow
