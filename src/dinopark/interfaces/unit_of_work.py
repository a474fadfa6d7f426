"""Unit of Work interface for DINOPARK.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the park stores and abstract commit/rollback methods. Everything a
handler reads and writes inside one `with uow:` block belongs to a single
transaction.
"""

from __future__ import annotations

import abc

from .cage_store import CageStore
from .dinosaur_store import DinosaurStore
from .species_registry import SpeciesRegistry


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    cages: CageStore
    dinosaurs: DinosaurStore
    species: SpeciesRegistry

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
