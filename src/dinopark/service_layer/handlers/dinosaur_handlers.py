"""Handlers for dinosaur registration commands."""

import logging
from collections.abc import Callable

from dinopark.domain.errors import DinosaurAlreadyExistsError, InvalidDinosaurError
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork
from dinopark.service_layer import commands

logger = logging.getLogger(__name__)


def add_dinosaur(cmd: commands.AddDinosaur, uow: AbstractUnitOfWork) -> None:
    """Register a new dinosaur, awaiting placement.

    The species is checked before the name, so an unknown species is reported
    even when the name is also taken.

    Raises:
        InvalidDinosaurError: If the name is empty.
        InvalidSpeciesError: If the species is not registered.
        DinosaurAlreadyExistsError: If the name is already taken.
    """

    if not cmd.name or not cmd.name.strip():
        raise InvalidDinosaurError(cmd.name, "name must not be empty")

    with uow:
        diet = uow.species.resolve_diet(cmd.species)
        if uow.dinosaurs.get(cmd.name) is not None:
            raise DinosaurAlreadyExistsError(cmd.name)
        uow.dinosaurs.add(cmd.name, cmd.species)
        uow.commit()

    logger.info("Added dinosaur %s (%s, %s)", cmd.name, cmd.species, diet.value)


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.AddDinosaur: add_dinosaur,
}
