"""In-memory shared data store for park adapters."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from dinopark.domain.value_objects import KNOWN_SPECIES, Diet

# pylint: disable=too-few-public-methods


@dataclass(slots=True)
class CageRow:
    """Mutable stored state of a cage."""

    label: str
    max_occupancy: int
    has_power: bool
    version: int = 0


@dataclass(slots=True)
class DinosaurRow:
    """Mutable stored state of a dinosaur."""

    name: str
    species: str
    cage_label: str | None = None


def _default_species() -> dict[str, Diet]:
    return {s.name: s.diet for s in KNOWN_SPECIES}


@dataclass(slots=True)
class InMemoryParkData:
    """Shared in-memory backing store for the in-memory park adapters.

    A single shared instance should be passed to the cage store, dinosaur
    store and species registry so that occupancy, diets and assignments
    resolve against the same data. Dicts preserve insertion order, which
    doubles as creation order for listings.

    ``lock`` serialises compare-and-swap writes when several threads share
    the instance. It is re-entrant so a store may call into another while
    holding it.
    """

    # keyed by species name
    species: dict[str, Diet] = field(default_factory=_default_species)

    # keyed by cage label
    cages: dict[str, CageRow] = field(default_factory=dict)

    # keyed by dinosaur name
    dinosaurs: dict[str, DinosaurRow] = field(default_factory=dict)

    lock: threading.RLock = field(default_factory=threading.RLock)
