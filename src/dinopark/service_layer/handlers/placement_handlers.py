"""Handlers for placing dinosaurs into cages."""

import logging
from collections.abc import Callable

from dinopark.domain.errors import (
    CageNotFoundError,
    DinosaurNotFoundError,
    PlacementError,
)
from dinopark.domain.placement import assess_placement
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork
from dinopark.service_layer import commands

from .census import StoreCensus

logger = logging.getLogger(__name__)


def assign_dinosaur_to_cage(
    cmd: commands.AssignDinosaurToCage, uow: AbstractUnitOfWork
) -> None:
    """Place a dinosaur in a cage.

    The cage is read with a row lock, the placement rules run against fresh
    occupant counts, and the assignment is written behind a compare-and-swap on
    the cage version, all inside one unit of work. A dinosaur already in
    another cage is moved; its previous cage is not checked.

    Raises:
        DinosaurNotFoundError: If the dinosaur does not exist.
        CageNotFoundError: If the cage does not exist.
        CapacityExceededError: If the cage is full.
        IncompatiblePowerStateError: If the cage has no power.
        IncompatibleSpeciesError: If the occupants rule out the dinosaur.
        CageVersionConflictError: If a concurrent writer changed the cage.
    """

    with uow:
        if (dinosaur := uow.dinosaurs.get(cmd.dinosaur_name)) is None:
            raise DinosaurNotFoundError(cmd.dinosaur_name)
        if (cage := uow.cages.get(cmd.cage_label, for_update=True)) is None:
            raise CageNotFoundError(cmd.cage_label)

        try:
            assess_placement(dinosaur, cage, StoreCensus(uow.dinosaurs, cage.label))
        except PlacementError as e:
            logger.info("Rejected placement of %s in %s: %s", dinosaur.name, cage.label, e)
            raise

        uow.cages.claim(cage.label, expected_version=cage.version)
        uow.dinosaurs.assign(dinosaur.name, cage.label)
        uow.commit()

    logger.info("Placed %s (%s) in cage %s", dinosaur.name, dinosaur.species, cage.label)


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.AssignDinosaurToCage: assign_dinosaur_to_cage,
}
