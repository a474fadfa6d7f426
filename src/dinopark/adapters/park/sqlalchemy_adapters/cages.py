"""SQLAlchemy-backed cage store.

Occupancy is computed with a correlated ``COUNT`` over ``dinosaur.cage_id`` on
every read. Writes that depend on a previous read (placements, power changes)
go through a compare-and-swap on ``cage.version``; reading with
``for_update=True`` additionally takes a row lock on backends that support it
(PostgreSQL). SQLite ignores ``FOR UPDATE`` and relies on its database-level
write lock plus the version check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError

from dinopark.domain.errors import CageAlreadyExistsError
from dinopark.domain.model import Cage
from dinopark.interfaces.cage_store import CageFilter, CageStore
from dinopark.interfaces.errors import CageVersionConflictError, StoreError

from .errors import integrity_message, unavailable_on_dbapi_error
from .schema import cage, dinosaur

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.engine import Connection, Row


def _select_cages() -> Select:
    occupancy = (
        select(func.count(dinosaur.c.id))
        .where(dinosaur.c.cage_id == cage.c.id)
        .correlate(cage)
        .scalar_subquery()
        .label("occupancy")
    )
    return select(
        cage.c.label,
        cage.c.max_occupancy,
        cage.c.has_power,
        cage.c.version,
        occupancy,
    )


def _row_to_cage(row: Row) -> Cage:
    return Cage(
        label=row.label,
        max_occupancy=int(row.max_occupancy),
        has_power=bool(row.has_power),
        occupancy=int(row.occupancy),
        version=int(row.version),
    )


class SqlAlchemyCageStore(CageStore):
    """CageStore implementation that supports both PostgreSQL and SQLite."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- reads ---

    def get(self, label: str, *, for_update: bool = False) -> Cage | None:
        stmt = _select_cages().where(cage.c.label == label)
        with unavailable_on_dbapi_error():
            if for_update:
                # lock first: FOR UPDATE does not mix with the aggregate subquery
                lock = select(cage.c.id).where(cage.c.label == label).with_for_update()
                self.connection.execute(lock)
            row = self.connection.execute(stmt).fetchone()
        return None if row is None else _row_to_cage(row)

    def find(self, cage_filter: CageFilter | None = None) -> list[Cage]:
        stmt = _select_cages()
        if cage_filter is not None and cage_filter.has_power is not None:
            stmt = stmt.where(cage.c.has_power == cage_filter.has_power)
        stmt = stmt.order_by(cage.c.id)
        with unavailable_on_dbapi_error():
            rows = self.connection.execute(stmt).fetchall()
        return [_row_to_cage(row) for row in rows]

    # --- writes ---

    def add(self, new_cage: Cage) -> None:  # pylint: disable=arguments-renamed
        if self._version_of(new_cage.label) is not None:
            raise CageAlreadyExistsError(new_cage.label)
        stmt = insert(cage).values(
            label=new_cage.label,
            max_occupancy=new_cage.max_occupancy,
            has_power=new_cage.has_power,
        )
        try:
            with unavailable_on_dbapi_error():
                self.connection.execute(stmt)
        except IntegrityError as e:
            # lost a race against another writer adding the same label
            if "unique" in integrity_message(e) or "duplicate" in integrity_message(e):
                raise CageAlreadyExistsError(new_cage.label) from e
            raise StoreError(str(e)) from e

    def claim(self, label: str, expected_version: int) -> None:
        self._compare_and_swap(label, expected_version, {})

    def set_power(self, label: str, power_on: bool, expected_version: int) -> None:
        self._compare_and_swap(label, expected_version, {"has_power": power_on})

    # --- internals ---

    def _compare_and_swap(
        self, label: str, expected_version: int, values: dict[str, object]
    ) -> None:
        stmt = (
            update(cage)
            .where(cage.c.label == label, cage.c.version == expected_version)
            .values(version=cage.c.version + 1, **values)
        )
        with unavailable_on_dbapi_error():
            result = self.connection.execute(stmt)
        if result.rowcount != 1:
            raise CageVersionConflictError(
                label, expected_version, self._version_of(label)
            )

    def _version_of(self, label: str) -> int | None:
        stmt = select(cage.c.version).where(cage.c.label == label)
        with unavailable_on_dbapi_error():
            version = self.connection.execute(stmt).scalar_one_or_none()
        return None if version is None else int(version)
