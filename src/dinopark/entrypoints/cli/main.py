"""DINOPARK CLI entry point.

Defines the top-level ``dinopark`` command (via Click-Extra), configures
logging for the whole invocation, and registers the command groups:

- ``dinopark cage``    : add cages, switch power, list occupants.
- ``dinopark dino``    : register, list and place dinosaurs.
- ``dinopark species`` : list the species registry.
- ``dinopark db``      : schema management (upgrade/current/heads/history/status).

Examples
    $ dinopark db upgrade --force
    $ dinopark cage add T-Rex-Pen --max-occupancy 2 --power
    $ dinopark dino add Rex Tyrannosaurus
    $ dinopark dino place Rex T-Rex-Pen
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from dinopark import __version__
from dinopark.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .cages import cage as cage_group
from .db import db as db_group
from .dinosaurs import dino as dino_group
from .helpers.log_level_parser import parse_log_level
from .species import species as species_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """DINOPARK command-line interface.

    Keeps track of the park's cages and dinosaurs and enforces the containment
    rules: a dinosaur only enters a powered cage with room to spare, carnivores
    only share with their own species, herbivores never share with carnivores,
    and an occupied cage cannot be powered down.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("dinopark", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="DINOPARK_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="DINOPARK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING/ERROR occurs, or on exit with "
        "--force-flush. Console verbosity is unaffected."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit, even without errors.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL), for both console "
        "and flight recorder. Repeatable (e.g. -L sqlalchemy.engine=INFO) or via "
        "DINOPARK_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def dinopark(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """DINOPARK command-line interface."""

    # 0) effective console verbosity, clamped to DEBUG..CRITICAL
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) startup banner
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # 6) runs after the subcommand returns
    ctx.call_on_close(logging.shutdown)


dinopark.add_command(cage_group)
dinopark.add_command(dino_group)
dinopark.add_command(species_group)
dinopark.add_command(db_group)
