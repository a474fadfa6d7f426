"""Read-side queries over the park.

Queries run in their own unit of work and never commit. Results are plain
domain read models (`Cage`, `Dinosaur`, `Species`).
"""

from __future__ import annotations

from dinopark.domain.errors import CageNotFoundError, DinosaurNotFoundError
from dinopark.domain.model import Cage, Dinosaur
from dinopark.domain.value_objects import Diet, Species
from dinopark.interfaces.cage_store import CageFilter
from dinopark.interfaces.dinosaur_store import DinosaurFilter
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork


class ParkQueries:
    """Facade for the read operations exposed to entrypoints."""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    # --- cages ---

    def get_cage(self, label: str) -> Cage:
        """Return a cage by label.

        Raises:
            CageNotFoundError: If no cage has this label.
        """
        with self.uow:
            if (cage := self.uow.cages.get(label)) is None:
                raise CageNotFoundError(label)
            return cage

    def list_cages(self, has_power: bool | None = None) -> list[Cage]:
        """List cages in creation order, optionally only powered/unpowered ones."""
        with self.uow:
            return self.uow.cages.find(CageFilter(has_power=has_power))

    def list_dinosaurs_in_cage(self, label: str) -> list[Dinosaur]:
        """List the occupants of a cage.

        Raises:
            CageNotFoundError: If no cage has this label.
        """
        with self.uow:
            if self.uow.cages.get(label) is None:
                raise CageNotFoundError(label)
            return self.uow.dinosaurs.list_in_cage(label)

    # --- dinosaurs ---

    def get_dinosaur(self, name: str) -> Dinosaur:
        """Return a dinosaur by name.

        Raises:
            DinosaurNotFoundError: If no dinosaur has this name.
        """
        with self.uow:
            if (dinosaur := self.uow.dinosaurs.get(name)) is None:
                raise DinosaurNotFoundError(name)
            return dinosaur

    def list_dinosaurs(
        self,
        species: str | None = None,
        diet: Diet | None = None,
        awaiting_cage: bool | None = None,
    ) -> list[Dinosaur]:
        """List dinosaurs in creation order, filtered by any given criteria.

        A `species` filter is matched by name only; an unregistered species
        simply matches no dinosaur.
        """
        with self.uow:
            return self.uow.dinosaurs.find(
                DinosaurFilter(species=species, diet=diet, awaiting_cage=awaiting_cage)
            )

    # --- species ---

    def list_species(self) -> list[Species]:
        """List the registered species, ordered by name."""
        with self.uow:
            return self.uow.species.all()
