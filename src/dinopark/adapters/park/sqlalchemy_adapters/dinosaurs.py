"""SQLAlchemy-backed dinosaur store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError

from dinopark.domain.errors import DinosaurAlreadyExistsError, InvalidSpeciesError
from dinopark.domain.model import Dinosaur
from dinopark.domain.value_objects import Diet
from dinopark.interfaces.dinosaur_store import DinosaurFilter, DinosaurStore
from dinopark.interfaces.errors import StoreError

from .errors import integrity_message, unavailable_on_dbapi_error
from .schema import cage, dinosaur, species

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select
    from sqlalchemy.engine import Connection, Row

# all flags must be present
UNIQUE_NAME_KEYWORDS = ("name", "unique")  # pragma: no mutate
DUPLICATE_KEY_KEYWORDS = ("duplicate",)  # pragma: no mutate
FOREIGN_KEY_KEYWORDS = ("foreign",)  # pragma: no mutate


def _select_dinosaurs() -> Select:
    return (
        select(
            dinosaur.c.name,
            dinosaur.c.species,
            species.c.diet,
            cage.c.label.label("cage_label"),
        )
        .select_from(dinosaur)
        .join(species, species.c.name == dinosaur.c.species)
        .outerjoin(cage, cage.c.id == dinosaur.c.cage_id)
    )


def _row_to_dinosaur(row: Row) -> Dinosaur:
    return Dinosaur(
        name=row.name,
        species=row.species,
        diet=Diet(row.diet),
        cage_label=row.cage_label,
    )


def _cage_id(label: str) -> ColumnElement:
    return select(cage.c.id).where(cage.c.label == label).scalar_subquery()


class SqlAlchemyDinosaurStore(DinosaurStore):
    """DinosaurStore implementation that supports both PostgreSQL and SQLite."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- reads ---

    def get(self, name: str) -> Dinosaur | None:
        stmt = _select_dinosaurs().where(dinosaur.c.name == name)
        with unavailable_on_dbapi_error():
            row = self.connection.execute(stmt).fetchone()
        return None if row is None else _row_to_dinosaur(row)

    def find(self, dinosaur_filter: DinosaurFilter | None = None) -> list[Dinosaur]:
        stmt = _select_dinosaurs()
        if dinosaur_filter is not None:
            if dinosaur_filter.species is not None:
                stmt = stmt.where(dinosaur.c.species == dinosaur_filter.species)
            if dinosaur_filter.diet is not None:
                stmt = stmt.where(species.c.diet == dinosaur_filter.diet.value)
            if dinosaur_filter.awaiting_cage is True:
                stmt = stmt.where(dinosaur.c.cage_id.is_(None))
            elif dinosaur_filter.awaiting_cage is False:
                stmt = stmt.where(dinosaur.c.cage_id.is_not(None))
        return self._fetch_all(stmt.order_by(dinosaur.c.id))

    def list_in_cage(self, label: str) -> list[Dinosaur]:
        stmt = _select_dinosaurs().where(cage.c.label == label).order_by(dinosaur.c.id)
        return self._fetch_all(stmt)

    # --- occupancy queries ---

    def count_in_cage(self, label: str) -> int:
        stmt = select(func.count(dinosaur.c.id)).where(
            dinosaur.c.cage_id == _cage_id(label)
        )
        return self._count(stmt)

    def count_in_cage_excluding_species(self, label: str, species_name: str) -> int:  # pylint: disable=arguments-renamed
        stmt = select(func.count(dinosaur.c.id)).where(
            dinosaur.c.cage_id == _cage_id(label),
            dinosaur.c.species != species_name,
        )
        return self._count(stmt)

    def count_carnivores_in_cage(self, label: str) -> int:
        stmt = (
            select(func.count(dinosaur.c.id))
            .select_from(dinosaur)
            .join(species, species.c.name == dinosaur.c.species)
            .where(
                dinosaur.c.cage_id == _cage_id(label),
                species.c.diet == Diet.CARNIVORE.value,
            )
        )
        return self._count(stmt)

    # --- writes ---

    def add(self, name: str, species_name: str) -> None:  # pylint: disable=arguments-renamed
        if self.get(name) is not None:
            raise DinosaurAlreadyExistsError(name)
        stmt = insert(dinosaur).values(name=name, species=species_name)
        try:
            with unavailable_on_dbapi_error():
                self.connection.execute(stmt)
        except IntegrityError as e:
            self._raise_from_integrity_error(e, name, species_name)

    def assign(self, name: str, label: str) -> None:
        stmt = (
            update(dinosaur)
            .where(dinosaur.c.name == name)
            .values(cage_id=_cage_id(label))
        )
        with unavailable_on_dbapi_error():
            self.connection.execute(stmt)

    # --- internals ---

    def _fetch_all(self, stmt: Select) -> list[Dinosaur]:
        with unavailable_on_dbapi_error():
            rows = self.connection.execute(stmt).fetchall()
        return [_row_to_dinosaur(row) for row in rows]

    def _count(self, stmt: Select) -> int:
        with unavailable_on_dbapi_error():
            return int(self.connection.execute(stmt).scalar_one())

    @staticmethod
    def _raise_from_integrity_error(
        integrity_error: IntegrityError, name: str, species_name: str
    ) -> None:
        """Map a failed insert to the constraint that fired.

        Raises:
            DinosaurAlreadyExistsError: The name was taken by a concurrent writer.
            InvalidSpeciesError: The species is not in the registry.
            StoreError: Any other integrity failure.
        """
        msg = integrity_message(integrity_error)
        if all(kw in msg for kw in UNIQUE_NAME_KEYWORDS) or any(
            kw in msg for kw in DUPLICATE_KEY_KEYWORDS
        ):
            raise DinosaurAlreadyExistsError(name) from integrity_error
        if any(kw in msg for kw in FOREIGN_KEY_KEYWORDS):
            raise InvalidSpeciesError(species_name) from integrity_error
        raise StoreError(msg) from integrity_error
