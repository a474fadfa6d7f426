"""``dinopark dino`` commands: register, inspect and place dinosaurs."""

from __future__ import annotations

import click
import click_extra as clickx

from dinopark.domain.value_objects import Diet
from dinopark.service_layer import commands

from .app import get_app, park_errors
from .cages import json_option
from .helpers import success
from .helpers.render import dinosaur_to_dict, echo_json, print_dinosaurs


@click.group(cls=clickx.ExtraGroup)
def dino() -> None:
    """Dinosaur management commands."""


@dino.command("add")
@click.argument("name")
@click.argument("species")
@click.pass_context
def add_dinosaur(ctx: click.Context, name: str, species: str) -> None:
    """Register dinosaur NAME of SPECIES, awaiting placement."""
    app = get_app(ctx)
    with park_errors():
        app.message_bus.handle(commands.AddDinosaur(name=name, species=species))
    success(f"Added dinosaur {name}.")


@dino.command("show")
@click.argument("name")
@json_option
@click.pass_context
def show_dinosaur(ctx: click.Context, name: str, as_json: bool) -> None:
    """Show one dinosaur."""
    app = get_app(ctx)
    with park_errors():
        found = app.queries.get_dinosaur(name)
    if as_json:
        echo_json(dinosaur_to_dict(found))
    else:
        print_dinosaurs([found], title=found.name)


@dino.command("list")
@click.option("--species", "-s", help="Only dinosaurs of this species.")
@click.option(
    "--diet",
    "-d",
    type=click.Choice([d.value for d in Diet], case_sensitive=False),
    help="Only dinosaurs with this diet.",
)
@click.option(
    "--awaiting-cage/--caged",
    "awaiting_cage",
    default=None,
    help="Only dinosaurs not yet placed (or only placed ones).",
)
@json_option
@click.pass_context
def list_dinosaurs(
    ctx: click.Context,
    species: str | None,
    diet: str | None,
    awaiting_cage: bool | None,
    as_json: bool,
) -> None:
    """List dinosaurs in creation order."""
    app = get_app(ctx)
    with park_errors():
        found = app.queries.list_dinosaurs(
            species=species,
            diet=Diet.from_string(diet) if diet else None,
            awaiting_cage=awaiting_cage,
        )
    if as_json:
        echo_json([dinosaur_to_dict(d) for d in found])
    else:
        print_dinosaurs(found)


@dino.command("place")
@click.argument("name")
@click.argument("cage_label", metavar="CAGE")
@click.pass_context
def place_dinosaur(ctx: click.Context, name: str, cage_label: str) -> None:
    """Place dinosaur NAME in CAGE, moving it if it is already caged."""
    app = get_app(ctx)
    with park_errors():
        app.message_bus.handle(
            commands.AssignDinosaurToCage(dinosaur_name=name, cage_label=cage_label)
        )
    success(f"Placed {name} in cage {cage_label}.")
