"""Handlers for cage management commands."""

import logging
from collections.abc import Callable

from dinopark.domain.errors import (
    CageAlreadyExistsError,
    CageNotFoundError,
    IncompatiblePowerStateError,
)
from dinopark.domain.model import Cage
from dinopark.domain.placement import assess_power_change
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork
from dinopark.service_layer import commands

from .census import StoreCensus

logger = logging.getLogger(__name__)


def add_cage(cmd: commands.AddCage, uow: AbstractUnitOfWork) -> None:
    """Add a new empty cage.

    Raises:
        InvalidCageError: If the label is empty or max_occupancy is below 1.
        CageAlreadyExistsError: If the label is already in use.
    """

    cage = Cage(label=cmd.label, max_occupancy=cmd.max_occupancy, has_power=cmd.has_power)

    with uow:
        if uow.cages.get(cage.label) is not None:
            raise CageAlreadyExistsError(cage.label)
        uow.cages.add(cage)
        uow.commit()

    logger.info(
        "Added cage %s (max_occupancy=%d, power=%s)",
        cage.label,
        cage.max_occupancy,
        "on" if cage.has_power else "off",
    )


def set_cage_power(cmd: commands.SetCagePower, uow: AbstractUnitOfWork) -> None:
    """Switch a cage's power, refusing to power down an occupied cage.

    Raises:
        CageNotFoundError: If the cage does not exist.
        IncompatiblePowerStateError: If powering off a cage that holds dinosaurs.
        CageVersionConflictError: If a concurrent writer changed the cage.
    """

    with uow:
        if (cage := uow.cages.get(cmd.cage_label, for_update=True)) is None:
            raise CageNotFoundError(cmd.cage_label)

        try:
            assess_power_change(cage, cmd.power_on, StoreCensus(uow.dinosaurs, cage.label))
        except IncompatiblePowerStateError as e:
            logger.info("Rejected power off for cage %s: %s", cage.label, e)
            raise

        uow.cages.set_power(cage.label, cmd.power_on, expected_version=cage.version)
        uow.commit()

    logger.info("Cage %s power %s", cage.label, "on" if cmd.power_on else "off")


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.AddCage: add_cage,
    commands.SetCagePower: set_cage_power,
}
