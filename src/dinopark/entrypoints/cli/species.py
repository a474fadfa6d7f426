"""``dinopark species`` commands."""

import click
import click_extra as clickx

from .app import get_app, park_errors
from .cages import json_option
from .helpers.render import echo_json, print_species, species_to_dict


@click.group(cls=clickx.ExtraGroup)
def species() -> None:
    """Species registry commands."""


@species.command("list")
@json_option
@click.pass_context
def list_species(ctx: click.Context, as_json: bool) -> None:
    """List the registered species and their diets."""
    app = get_app(ctx)
    with park_errors():
        registered = app.queries.list_species()
    if as_json:
        echo_json([species_to_dict(s) for s in registered])
    else:
        print_species(registered)
