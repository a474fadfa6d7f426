"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddCage(Command):
    """Command to add a new, empty cage."""

    label: str
    max_occupancy: int
    has_power: bool = False


@dataclass(frozen=True)
class SetCagePower(Command):
    """Command to switch a cage's power on or off."""

    cage_label: str
    power_on: bool


@dataclass(frozen=True)
class AddDinosaur(Command):
    """Command to register a new dinosaur awaiting placement."""

    name: str
    species: str


@dataclass(frozen=True)
class AssignDinosaurToCage(Command):
    """Command to place a dinosaur in a cage, moving it if already placed."""

    dinosaur_name: str
    cage_label: str
