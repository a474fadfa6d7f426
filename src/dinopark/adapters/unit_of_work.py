"""Unit of Work implementations for DINOPARK.

`SqlAlchemyUnitOfWork` runs each `with uow:` block on its own connection and
transaction. `InMemoryUnitOfWork` works on a shared `InMemoryParkData` and
serialises whole blocks on the data lock instead of using transactions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dinopark.adapters.park.in_memory_adapters import (
    InMemoryCageStore,
    InMemoryDinosaurStore,
    InMemoryParkData,
    InMemorySpeciesRegistry,
)
from dinopark.adapters.park.sqlalchemy_adapters import (
    SqlAlchemyCageStore,
    SqlAlchemyDinosaurStore,
    SqlAlchemySpeciesRegistry,
)
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.cages = SqlAlchemyCageStore(self.connection)
        self.dinosaurs = SqlAlchemyDinosaurStore(self.connection)
        self.species = SqlAlchemySpeciesRegistry(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Non-durable Unit of Work over shared in-memory data.

    Store writes take effect immediately, so `rollback` cannot undo them.
    Handlers only write once every check has passed, which keeps a failed
    command from leaving partial state behind.
    """

    def __init__(self, data: InMemoryParkData | None = None):
        self.data = data if data is not None else InMemoryParkData()
        self.cages = InMemoryCageStore(self.data)
        self.dinosaurs = InMemoryDinosaurStore(self.data)
        self.species = InMemorySpeciesRegistry(self.data)

    def __enter__(self):
        self.data.lock.acquire()
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.data.lock.release()

    def commit(self):
        pass

    def rollback(self):
        pass
