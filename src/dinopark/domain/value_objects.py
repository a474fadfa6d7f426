"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum


class Diet(str, Enum):
    """Diet classification of a species."""

    CARNIVORE = "Carnivore"
    HERBIVORE = "Herbivore"

    @classmethod
    def from_string(cls, value: str) -> "Diet":
        """Parse a diet name case-insensitively (e.g. "carnivore")."""
        for diet in cls:
            if diet.value.lower() == value.strip().lower():
                return diet
        raise ValueError(f"Unknown diet: {value!r}")


@dataclass(frozen=True)
class Species:
    """Reference entry of the species registry."""

    name: str
    diet: Diet


#: Species shipped with a fresh database (see the seed migration).
KNOWN_SPECIES: tuple[Species, ...] = (
    Species("Tyrannosaurus", Diet.CARNIVORE),
    Species("Velociraptor", Diet.CARNIVORE),
    Species("Spinosaurus", Diet.CARNIVORE),
    Species("Megalosaurus", Diet.CARNIVORE),
    Species("Brachiosaurus", Diet.HERBIVORE),
    Species("Stegosaurus", Diet.HERBIVORE),
    Species("Ankylosaurus", Diet.HERBIVORE),
    Species("Triceratops", Diet.HERBIVORE),
)
