"""Bootstrap the message bus and queries with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dinopark import config
from dinopark.adapters.db.engine import make_engine
from dinopark.adapters.unit_of_work import SqlAlchemyUnitOfWork
from dinopark.service_layer.handlers import COMMAND_HANDLERS
from dinopark.service_layer.messagebus import MessageBus
from dinopark.service_layer.queries import ParkQueries

if TYPE_CHECKING:
    from dinopark.interfaces.unit_of_work import AbstractUnitOfWork
    from dinopark.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Wired application services handed to entrypoints."""

    message_bus: MessageBus
    queries: ParkQueries


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a SQL unit of work on a fresh engine for `url`."""
    return SqlAlchemyUnitOfWork(make_engine(url))


def build_message_bus(
    uow: AbstractUnitOfWork, command_handlers: dict[type[Command], Callable[..., None]]
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(uow, command_handlers=injected_command_handlers)


def bootstrap(
    uow: AbstractUnitOfWork | None = None, db_url: str | None = None
) -> AppContainer:
    """Wire the application.

    Args:
        uow: Unit of work to use. Built from `db_url` when omitted.
        db_url: Database URL; defaults to the DINOPARK_DB_URL environment variable.

    Raises:
        DatabaseUrlNotSetError: If no unit of work or URL is given and the
            environment variable is not set.
    """
    if uow is None:
        uow = build_uow(db_url or config.get_db_url())
    return AppContainer(
        message_bus=build_message_bus(uow, COMMAND_HANDLERS),
        queries=ParkQueries(uow),
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler declares as keyword arguments."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
