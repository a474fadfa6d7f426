"""Interface for the species registry."""

from __future__ import annotations

import abc

from dinopark.domain.errors import InvalidSpeciesError
from dinopark.domain.value_objects import Diet, Species


class SpeciesRegistry(abc.ABC):
    """Read-only lookup of species and their diets."""

    @abc.abstractmethod
    def get(self, name: str) -> Species | None:
        """Get a species by its name.

        Args:
            name: The exact species name (e.g. "Tyrannosaurus").

        Returns:
            The species if registered, otherwise None.
        """

    @abc.abstractmethod
    def all(self) -> list[Species]:
        """Return every registered species, ordered by name."""

    def resolve_diet(self, name: str) -> Diet:
        """Resolve the diet of a species.

        Raises:
            InvalidSpeciesError: If the species is not registered.
        """
        if (species := self.get(name)) is None:
            raise InvalidSpeciesError(name)
        return species.diet
