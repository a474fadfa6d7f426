"""Interface for the dinosaur store."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from dinopark.domain.model import Dinosaur
from dinopark.domain.value_objects import Diet


@dataclass(frozen=True, slots=True)
class DinosaurFilter:
    """Optional filters for listing dinosaurs. `None` means "don't filter".

    Attributes:
        species: Only dinosaurs of this species.
        diet: Only dinosaurs with this diet.
        awaiting_cage: True for unplaced dinosaurs only, False for placed only.
    """

    species: str | None = None
    diet: Diet | None = None
    awaiting_cage: bool | None = None


class DinosaurStore(abc.ABC):
    """Durable record of dinosaurs and their current cage assignment."""

    @abc.abstractmethod
    def get(self, name: str) -> Dinosaur | None:
        """Get a dinosaur by name, with its diet resolved through its species."""

    @abc.abstractmethod
    def add(self, name: str, species: str) -> None:
        """Add a new, unplaced dinosaur.

        The species must already be registered.

        Raises:
            DinosaurAlreadyExistsError: If the name is already taken.
        """

    @abc.abstractmethod
    def find(self, dinosaur_filter: DinosaurFilter | None = None) -> list[Dinosaur]:
        """List dinosaurs in creation order, optionally filtered."""

    @abc.abstractmethod
    def list_in_cage(self, label: str) -> list[Dinosaur]:
        """List the dinosaurs currently assigned to a cage, in creation order."""

    @abc.abstractmethod
    def assign(self, name: str, label: str) -> None:
        """Overwrite the cage assignment of a dinosaur."""

    # --- occupancy queries (always fresh) ---

    @abc.abstractmethod
    def count_in_cage(self, label: str) -> int:
        """Number of dinosaurs assigned to a cage."""

    @abc.abstractmethod
    def count_in_cage_excluding_species(self, label: str, species: str) -> int:
        """Number of dinosaurs in a cage whose species differs from `species`."""

    @abc.abstractmethod
    def count_carnivores_in_cage(self, label: str) -> int:
        """Number of carnivores (any species) in a cage."""
