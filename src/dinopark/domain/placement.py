"""Placement rule engine.

Pure decision functions that answer two questions:

- may this dinosaur move into this cage? (`assess_placement`)
- may this cage's power be switched to the requested state? (`assess_power_change`)

The functions never write anything. They raise a `PlacementError` subclass for
the first rule that fails and return `None` when the action is allowed; the
caller is responsible for committing the change in the same transaction that
supplied the inputs.

Occupant information is pulled lazily through an `OccupantCensus`, so only the
query the active rule branch needs is ever issued.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .errors import (
    CapacityExceededError,
    IncompatiblePowerStateError,
    IncompatibleSpeciesError,
)
from .model import Cage, Dinosaur

logger = logging.getLogger(__name__)

NOT_POWERED_REASON = "the cage has no power"
OCCUPIED_POWER_OFF_REASON = "an occupied cage cannot be powered down"
OTHER_SPECIES_REASON = "the cage holds dinosaurs of another species"
CARNIVORE_PRESENT_REASON = "the cage holds carnivores"


class OccupantCensus(Protocol):
    """Fresh, uncached view of who is currently inside one cage."""

    def occupancy(self) -> int:
        """Number of dinosaurs currently assigned to the cage."""
        ...  # pylint: disable=unnecessary-ellipsis

    def count_other_species(self, species: str) -> int:
        """Number of occupants whose species differs from `species`."""
        ...  # pylint: disable=unnecessary-ellipsis

    def count_carnivores(self) -> int:
        """Number of carnivorous occupants, any species."""
        ...  # pylint: disable=unnecessary-ellipsis


def assess_placement(dinosaur: Dinosaur, cage: Cage, census: OccupantCensus) -> None:
    """Check whether `dinosaur` may be placed in `cage`.

    Rules are evaluated in order and the first failure wins:

    1. the cage must have a free slot,
    2. the cage must be powered,
    3. the species must be compatible with the current occupants:
       a carnivore only shares with its own species, a herbivore shares with
       any herbivore but never with a carnivore.

    Args:
        dinosaur: The dinosaur to place.
        cage: The target cage, read in the current transaction.
        census: Occupant counts for the target cage.

    Raises:
        CapacityExceededError: If the cage is full.
        IncompatiblePowerStateError: If the cage has no power.
        IncompatibleSpeciesError: If the occupants rule out this dinosaur.
    """
    ensure_capacity(cage, census)
    ensure_powered(cage)
    ensure_species_compatible(dinosaur, cage, census)


def ensure_capacity(cage: Cage, census: OccupantCensus) -> None:
    """Raise `CapacityExceededError` unless the cage has a free slot."""
    if census.occupancy() >= cage.max_occupancy:
        raise CapacityExceededError(cage.label, cage.max_occupancy)


def ensure_powered(cage: Cage) -> None:
    """Raise `IncompatiblePowerStateError` unless the cage is powered."""
    if not cage.has_power:
        raise IncompatiblePowerStateError(cage.label, NOT_POWERED_REASON)


def ensure_species_compatible(
    dinosaur: Dinosaur, cage: Cage, census: OccupantCensus
) -> None:
    """Raise `IncompatibleSpeciesError` if the occupants rule out `dinosaur`."""
    if dinosaur.is_carnivore:
        if census.count_other_species(dinosaur.species) > 0:
            raise IncompatibleSpeciesError(
                dinosaur.name, dinosaur.species, cage.label, OTHER_SPECIES_REASON
            )
    elif census.count_carnivores() > 0:
        raise IncompatibleSpeciesError(
            dinosaur.name, dinosaur.species, cage.label, CARNIVORE_PRESENT_REASON
        )


def assess_power_change(cage: Cage, power_on: bool, census: OccupantCensus) -> None:
    """Check whether `cage` may be switched to `power_on`.

    Powering on is always allowed. Powering off is refused while anything is
    inside the cage; an empty cage may be powered off even if it is already off.

    Raises:
        IncompatiblePowerStateError: If powering off an occupied cage.
    """
    if power_on:
        return
    if (occupancy := census.occupancy()) > 0:
        logger.debug(
            "Refusing to power down cage %s with %d occupant(s)", cage.label, occupancy
        )
        raise IncompatiblePowerStateError(cage.label, OCCUPIED_POWER_OFF_REASON)
