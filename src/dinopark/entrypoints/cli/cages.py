"""``dinopark cage`` commands: create cages, switch power, inspect occupants."""

from __future__ import annotations

import click
import click_extra as clickx

from dinopark.service_layer import commands

from .app import get_app, park_errors
from .helpers import success
from .helpers.render import (
    cage_to_dict,
    dinosaur_to_dict,
    echo_json,
    print_cages,
    print_dinosaurs,
)

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Write JSON to stdout instead of a table."
)


@click.group(cls=clickx.ExtraGroup)
def cage() -> None:
    """Cage management commands."""


@cage.command("add")
@click.argument("label")
@click.option(
    "--max-occupancy",
    "-m",
    type=click.IntRange(min=1),
    required=True,
    help="Maximum number of dinosaurs the cage can hold.",
)
@click.option(
    "--power/--no-power",
    default=False,
    show_default=True,
    help="Create the cage with its power on.",
)
@click.pass_context
def add_cage(ctx: click.Context, label: str, max_occupancy: int, power: bool) -> None:
    """Add a new, empty cage called LABEL."""
    app = get_app(ctx)
    with park_errors():
        app.message_bus.handle(
            commands.AddCage(label=label, max_occupancy=max_occupancy, has_power=power)
        )
    success(f"Added cage {label}.")


@cage.command("show")
@click.argument("label")
@json_option
@click.pass_context
def show_cage(ctx: click.Context, label: str, as_json: bool) -> None:
    """Show one cage."""
    app = get_app(ctx)
    with park_errors():
        found = app.queries.get_cage(label)
    if as_json:
        echo_json(cage_to_dict(found))
    else:
        print_cages([found], title=f"Cage {found.label}")


@cage.command("list")
@click.option(
    "--powered/--unpowered",
    "powered",
    default=None,
    help="Only list cages whose power is on (or off).",
)
@json_option
@click.pass_context
def list_cages(ctx: click.Context, powered: bool | None, as_json: bool) -> None:
    """List cages in creation order."""
    app = get_app(ctx)
    with park_errors():
        cages = app.queries.list_cages(has_power=powered)
    if as_json:
        echo_json([cage_to_dict(c) for c in cages])
    else:
        print_cages(cages)


@cage.command("power")
@click.argument("label")
@click.argument("state", type=click.Choice(["on", "off"], case_sensitive=False))
@click.pass_context
def set_power(ctx: click.Context, label: str, state: str) -> None:
    """Switch the power of cage LABEL on or off.

    An occupied cage cannot be powered off.
    """
    power_on = state.lower() == "on"
    app = get_app(ctx)
    with park_errors():
        app.message_bus.handle(commands.SetCagePower(cage_label=label, power_on=power_on))
    success(f"Cage {label} power {'on' if power_on else 'off'}.")


@cage.command("dinosaurs")
@click.argument("label")
@json_option
@click.pass_context
def list_occupants(ctx: click.Context, label: str, as_json: bool) -> None:
    """List the dinosaurs in cage LABEL."""
    app = get_app(ctx)
    with park_errors():
        occupants = app.queries.list_dinosaurs_in_cage(label)
    if as_json:
        echo_json([dinosaur_to_dict(d) for d in occupants])
    else:
        print_dinosaurs(occupants, title=f"Dinosaurs in {label}")
