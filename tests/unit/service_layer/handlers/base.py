"""Base class for handler tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dinopark.service_layer import commands

if TYPE_CHECKING:
    from dinopark.service_layer.messagebus import MessageBus


class HandlerTestBase:
    """Base class for handler tests providing a fresh bus and seeding helpers.

    Subclasses override `_seed_bus` to preload cages and dinosaurs through the
    bus itself; the committed flag is reset afterwards so assertions only see
    the command under test.
    """

    bus: MessageBus

    @pytest.fixture(autouse=True)
    def _attach_bus(self, make_test_bus):
        """Fresh bus per test, seeded by `_seed_bus`."""
        self.bus = make_test_bus()
        self._seed_bus()
        self.reset_committed()

    def _seed_bus(self) -> None:
        """Override to preload the bus."""

    # --- seeding helpers ---

    def add_cage(self, label: str, max_occupancy: int = 4, power: bool = True) -> None:
        self.bus.handle(commands.AddCage(label, max_occupancy, has_power=power))

    def add_dinosaur(self, name: str, species: str) -> None:
        self.bus.handle(commands.AddDinosaur(name, species))

    def place(self, name: str, label: str) -> None:
        self.bus.handle(commands.AssignDinosaurToCage(name, label))

    # --- assertions ---

    def assert_committed(self) -> None:
        """Assert that the unit of work was committed."""
        assert self.bus.uow.committed is True

    def assert_not_committed(self) -> None:
        """Assert that the unit of work was not committed."""
        assert self.bus.uow.committed is False

    def reset_committed(self) -> None:
        """Reset the committed flag on the unit of work."""
        self.bus.uow.committed = False
