"""SQLAlchemy-backed species registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from dinopark.domain.value_objects import Diet, Species
from dinopark.interfaces.species_registry import SpeciesRegistry

from .errors import unavailable_on_dbapi_error
from .schema import species

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


class SqlAlchemySpeciesRegistry(SpeciesRegistry):
    """Species registry reading the seeded ``species`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def get(self, name: str) -> Species | None:
        stmt = select(species.c.name, species.c.diet).where(species.c.name == name)
        with unavailable_on_dbapi_error():
            row = self.connection.execute(stmt).fetchone()
        if row is None:
            return None
        return Species(row.name, Diet(row.diet))

    def all(self) -> list[Species]:
        stmt = select(species.c.name, species.c.diet).order_by(species.c.name)
        with unavailable_on_dbapi_error():
            rows = self.connection.execute(stmt).fetchall()
        return [Species(row.name, Diet(row.diet)) for row in rows]
