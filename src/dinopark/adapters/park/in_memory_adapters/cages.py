"""In-memory cage store.

Occupancy is counted from the shared dinosaur rows on every read, the same
way the SQL adapter derives it. Compare-and-swap writes hold the shared lock.
"""

from dinopark.domain.errors import CageAlreadyExistsError
from dinopark.domain.model import Cage
from dinopark.interfaces.cage_store import CageFilter, CageStore
from dinopark.interfaces.errors import CageVersionConflictError

from .data import CageRow, InMemoryParkData


class InMemoryCageStore(CageStore):
    """In-memory CageStore for testing and non-durable use cases.

    Writes are applied immediately; there is no transaction to roll back.
    """

    def __init__(self, data: InMemoryParkData):
        self.data = data

    # --- reads ---

    def get(self, label: str, *, for_update: bool = False) -> Cage | None:
        # for_update is a no-op: the version check fences concurrent writers
        with self.data.lock:
            if (row := self.data.cages.get(label)) is None:
                return None
            return self._to_cage(row)

    def find(self, cage_filter: CageFilter | None = None) -> list[Cage]:
        has_power = None if cage_filter is None else cage_filter.has_power
        with self.data.lock:
            return [
                self._to_cage(row)
                for row in self.data.cages.values()
                if has_power is None or row.has_power == has_power
            ]

    # --- writes ---

    def add(self, cage: Cage) -> None:
        with self.data.lock:
            if cage.label in self.data.cages:
                raise CageAlreadyExistsError(cage.label)
            self.data.cages[cage.label] = CageRow(
                label=cage.label,
                max_occupancy=cage.max_occupancy,
                has_power=cage.has_power,
            )

    def claim(self, label: str, expected_version: int) -> None:
        with self.data.lock:
            row = self._checked_row(label, expected_version)
            row.version += 1

    def set_power(self, label: str, power_on: bool, expected_version: int) -> None:
        with self.data.lock:
            row = self._checked_row(label, expected_version)
            row.has_power = power_on
            row.version += 1

    # --- internals ---

    def _checked_row(self, label: str, expected_version: int) -> CageRow:
        row = self.data.cages.get(label)
        if row is None or row.version != expected_version:
            raise CageVersionConflictError(
                label, expected_version, None if row is None else row.version
            )
        return row

    def _to_cage(self, row: CageRow) -> Cage:
        occupancy = sum(
            1 for d in self.data.dinosaurs.values() if d.cage_label == row.label
        )
        return Cage(
            label=row.label,
            max_occupancy=row.max_occupancy,
            has_power=row.has_power,
            occupancy=occupancy,
            version=row.version,
        )
