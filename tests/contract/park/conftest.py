"""Fixtures for park store contract tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from dinopark.adapters.park.in_memory_adapters import InMemoryParkData
from dinopark.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork

BACKENDS = ["memory", "sqlite_memory", "sqlite_file", "postgres"]


@pytest.fixture(params=BACKENDS)
def backend(request: pytest.FixtureRequest) -> str:
    """Name of the store backend under test."""
    return request.param


@pytest.fixture
def make_uow(request: pytest.FixtureRequest, backend: str) -> Callable[[], AbstractUnitOfWork]:
    """Factory for units of work sharing one backing store.

    Engines are requested lazily so only the backend under test is started.
    """
    match backend:
        case "memory":
            data = InMemoryParkData()
            return lambda: InMemoryUnitOfWork(data)
        case "sqlite_memory":
            engine = request.getfixturevalue("sqlite_engine_memory")
        case "sqlite_file":
            engine = request.getfixturevalue("sqlite_engine_file")
        case "postgres":
            engine = request.getfixturevalue("postgres_engine")
        case _:
            raise ValueError(f"unknown backend: {backend}")
    return lambda: SqlAlchemyUnitOfWork(engine)
