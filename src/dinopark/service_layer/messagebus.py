"""Message bus routing park commands to their handlers."""

import logging
from collections.abc import Callable

from dinopark.domain.errors import DomainError
from dinopark.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Synchronous command bus; the single write entrypoint of the service layer.

    Handlers are callables taking only the command. Their dependencies (the
    unit of work) are bound beforehand, see `dinopark.bootstrap`.

    Rule violations (`DomainError`) are expected outcomes and are logged
    without a traceback. Anything else is logged with one. Both propagate.

    Args:
        uow: The unit of work bound into the handlers, exposed for convenience.
        command_handlers: A mapping of command types to their handlers.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Dispatch `cmd` to its handler.

        Raises:
            NoHandlerForCommand: If no handler is registered for the command type.
            DomainError: If the command violates a park rule.
            Exception: Whatever else the handler raises.
        """

        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            handler(cmd)
        except DomainError as e:
            logger.debug("Command %s rejected: %s", type(cmd).__name__, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise

    @staticmethod
    def _get_handler_name(fn: Callable[..., None]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
