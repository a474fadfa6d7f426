"""In-memory implementations of the park stores.

Data lives in a shared `InMemoryParkData` instance and is lost when it is
discarded. Use for unit tests, prototyping, or scenarios where durability is
not required.
"""

from .cages import InMemoryCageStore
from .data import InMemoryParkData
from .dinosaurs import InMemoryDinosaurStore
from .species import InMemorySpeciesRegistry

__all__ = [
    "InMemoryCageStore",
    "InMemoryDinosaurStore",
    "InMemoryParkData",
    "InMemorySpeciesRegistry",
]
