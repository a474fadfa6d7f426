"""In-memory species registry."""

from dinopark.domain.value_objects import Species
from dinopark.interfaces.species_registry import SpeciesRegistry

from .data import InMemoryParkData


class InMemorySpeciesRegistry(SpeciesRegistry):
    """Species registry over the shared in-memory data."""

    def __init__(self, data: InMemoryParkData):
        self.data = data

    def get(self, name: str) -> Species | None:
        if (diet := self.data.species.get(name)) is None:
            return None
        return Species(name, diet)

    def all(self) -> list[Species]:
        return [Species(name, diet) for name, diet in sorted(self.data.species.items())]
