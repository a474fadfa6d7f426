"""Rendering of park read models for the CLI.

Tables are printed with Rich to stdout; ``--json`` output is a plain JSON
document on stdout so it can be piped.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from dinopark.domain.model import Cage, Dinosaur
from dinopark.domain.value_objects import Species


def cage_to_dict(cage: Cage) -> dict[str, Any]:
    return {
        "label": cage.label,
        "max_occupancy": cage.max_occupancy,
        "occupancy": cage.occupancy,
        "has_power": cage.has_power,
    }


def dinosaur_to_dict(dinosaur: Dinosaur) -> dict[str, Any]:
    return {
        "name": dinosaur.name,
        "species": dinosaur.species,
        "diet": dinosaur.diet.value,
        "cage": dinosaur.cage_label,
    }


def species_to_dict(species: Species) -> dict[str, Any]:
    return {"name": species.name, "diet": species.diet.value}


def echo_json(payload: Any) -> None:
    """Write `payload` as indented JSON to stdout."""
    click.echo(json.dumps(payload, indent=2))


def _print(table: Table) -> None:
    # resolved per call so CliRunner's stdout swap is honoured
    Console(soft_wrap=True).print(table)


def print_cages(cages: Sequence[Cage], title: str = "Cages") -> None:
    table = Table(title=title)
    table.add_column("Label")
    table.add_column("Occupancy", justify="right")
    table.add_column("Power")
    for cage in cages:
        table.add_row(
            cage.label,
            f"{cage.occupancy}/{cage.max_occupancy}",
            "on" if cage.has_power else "off",
        )
    _print(table)


def print_dinosaurs(dinosaurs: Sequence[Dinosaur], title: str = "Dinosaurs") -> None:
    table = Table(title=title)
    table.add_column("Name")
    table.add_column("Species")
    table.add_column("Diet")
    table.add_column("Cage")
    for dinosaur in dinosaurs:
        table.add_row(
            dinosaur.name,
            dinosaur.species,
            dinosaur.diet.value,
            dinosaur.cage_label or "-",
        )
    _print(table)


def print_species(species: Sequence[Species]) -> None:
    table = Table(title="Species")
    table.add_column("Name")
    table.add_column("Diet")
    for s in species:
        table.add_row(s.name, s.diet.value)
    _print(table)
