"""Interface for the cage store."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from dinopark.domain.model import Cage


@dataclass(frozen=True, slots=True)
class CageFilter:
    """Optional filters for listing cages. `None` means "don't filter"."""

    has_power: bool | None = None


class CageStore(abc.ABC):
    """Durable record of cages.

    Occupancy is never stored: implementations derive it from the dinosaur
    assignments every time a cage is read.
    """

    @abc.abstractmethod
    def get(self, label: str, *, for_update: bool = False) -> Cage | None:
        """Get a cage by its label.

        Args:
            label: The cage label.
            for_update: Lock the cage row for the rest of the transaction when
                the backend supports row locks.

        Returns:
            The cage if found, otherwise None.
        """

    @abc.abstractmethod
    def add(self, cage: Cage) -> None:
        """Add a new cage. Occupancy and version of `cage` are ignored.

        Raises:
            CageAlreadyExistsError: If the label is already in use.
        """

    @abc.abstractmethod
    def find(self, cage_filter: CageFilter | None = None) -> list[Cage]:
        """List cages in creation order, optionally filtered."""

    @abc.abstractmethod
    def claim(self, label: str, expected_version: int) -> None:
        """Bump the cage version if it still equals `expected_version`.

        Called right before a placement is written so that two writers that
        read the same cage state cannot both commit.

        Raises:
            CageVersionConflictError: If the cage changed since it was read.
        """

    @abc.abstractmethod
    def set_power(self, label: str, power_on: bool, expected_version: int) -> None:
        """Write the power flag and bump the version (compare-and-swap).

        Raises:
            CageVersionConflictError: If the cage changed since it was read.
        """
