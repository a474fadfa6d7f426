"""Read models for cages and dinosaurs."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCageError, InvalidDinosaurError
from .value_objects import Diet


@dataclass(frozen=True, slots=True)
class Cage:
    """Immutable view of a cage at the time it was read.

    Conventions:
      - `label` is the caller-assigned identifier and never changes.
      - `occupancy` is derived from the dinosaur assignments when the cage is
        read; it is never stored on the cage itself.
      - `version` is bumped by every committed placement or power change and
        fences concurrent writers (compare-and-swap).
    """

    label: str
    max_occupancy: int
    has_power: bool
    occupancy: int = 0
    version: int = 0

    def __post_init__(self) -> None:
        if not self.label or not self.label.strip():
            raise InvalidCageError(self.label, "label must not be empty")
        if isinstance(self.max_occupancy, bool) or not isinstance(
            self.max_occupancy, int
        ):
            raise InvalidCageError(self.label, "max_occupancy must be an integer")
        if self.max_occupancy < 1:
            raise InvalidCageError(self.label, "max_occupancy must be at least 1")
        if self.occupancy < 0:
            raise InvalidCageError(self.label, "occupancy cannot be negative")


@dataclass(frozen=True, slots=True)
class Dinosaur:
    """Immutable view of a dinosaur.

    `diet` is resolved through the species registry when the dinosaur is read.
    `cage_label` is None while the dinosaur is awaiting placement.
    """

    name: str
    species: str
    diet: Diet
    cage_label: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidDinosaurError(self.name, "name must not be empty")

    @property
    def is_carnivore(self) -> bool:
        """True for carnivorous species."""
        return self.diet is Diet.CARNIVORE

    @property
    def awaiting_cage(self) -> bool:
        """True while the dinosaur has not been placed in any cage."""
        return self.cage_label is None
