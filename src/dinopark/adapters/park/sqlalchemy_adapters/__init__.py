"""SQLAlchemy Core implementations of the park stores."""

from .cages import SqlAlchemyCageStore
from .dinosaurs import SqlAlchemyDinosaurStore
from .species import SqlAlchemySpeciesRegistry

__all__ = [
    "SqlAlchemyCageStore",
    "SqlAlchemyDinosaurStore",
    "SqlAlchemySpeciesRegistry",
]
