"""Service layer handlers."""

from collections.abc import Callable

from .cage_handlers import COMMAND_HANDLERS as CAGE_COMMAND_HANDLERS
from .dinosaur_handlers import COMMAND_HANDLERS as DINOSAUR_COMMAND_HANDLERS
from .placement_handlers import COMMAND_HANDLERS as PLACEMENT_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    **CAGE_COMMAND_HANDLERS,
    **DINOSAUR_COMMAND_HANDLERS,
    **PLACEMENT_COMMAND_HANDLERS,
}
