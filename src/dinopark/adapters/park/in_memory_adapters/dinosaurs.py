"""In-memory dinosaur store."""

from collections.abc import Iterable

from dinopark.domain.errors import DinosaurAlreadyExistsError, InvalidSpeciesError
from dinopark.domain.model import Dinosaur
from dinopark.domain.value_objects import Diet
from dinopark.interfaces.dinosaur_store import DinosaurFilter, DinosaurStore

from .data import DinosaurRow, InMemoryParkData


class InMemoryDinosaurStore(DinosaurStore):
    """In-memory DinosaurStore for testing and non-durable use cases."""

    def __init__(self, data: InMemoryParkData):
        self.data = data

    # --- reads ---

    def get(self, name: str) -> Dinosaur | None:
        with self.data.lock:
            if (row := self.data.dinosaurs.get(name)) is None:
                return None
            return self._to_dinosaur(row)

    def find(self, dinosaur_filter: DinosaurFilter | None = None) -> list[Dinosaur]:
        f = dinosaur_filter or DinosaurFilter()
        with self.data.lock:
            found = [self._to_dinosaur(row) for row in self.data.dinosaurs.values()]
        return [
            d
            for d in found
            if (f.species is None or d.species == f.species)
            and (f.diet is None or d.diet is f.diet)
            and (f.awaiting_cage is None or d.awaiting_cage == f.awaiting_cage)
        ]

    def list_in_cage(self, label: str) -> list[Dinosaur]:
        with self.data.lock:
            return [self._to_dinosaur(row) for row in self._rows_in(label)]

    # --- occupancy queries ---

    def count_in_cage(self, label: str) -> int:
        with self.data.lock:
            return sum(1 for _ in self._rows_in(label))

    def count_in_cage_excluding_species(self, label: str, species: str) -> int:
        with self.data.lock:
            return sum(1 for row in self._rows_in(label) if row.species != species)

    def count_carnivores_in_cage(self, label: str) -> int:
        with self.data.lock:
            return sum(
                1
                for row in self._rows_in(label)
                if self.data.species[row.species] is Diet.CARNIVORE
            )

    # --- writes ---

    def add(self, name: str, species: str) -> None:
        with self.data.lock:
            if name in self.data.dinosaurs:
                raise DinosaurAlreadyExistsError(name)
            if species not in self.data.species:
                raise InvalidSpeciesError(species)
            self.data.dinosaurs[name] = DinosaurRow(name=name, species=species)

    def assign(self, name: str, label: str) -> None:
        with self.data.lock:
            if (row := self.data.dinosaurs.get(name)) is not None:
                row.cage_label = label

    # --- internals ---

    def _rows_in(self, label: str) -> Iterable[DinosaurRow]:
        return [row for row in self.data.dinosaurs.values() if row.cage_label == label]

    def _to_dinosaur(self, row: DinosaurRow) -> Dinosaur:
        return Dinosaur(
            name=row.name,
            species=row.species,
            diet=self.data.species[row.species],
            cage_label=row.cage_label,
        )
