"""Access to the wired application from CLI commands.

Commands obtain the `AppContainer` through `get_app`, which reuses one placed
on the root context's ``obj`` (tests do this) or bootstraps one from
``DINOPARK_DB_URL``. `park_errors` turns park failures into `ClickException`s
so they print as one line and exit with status 1.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from dinopark import config
from dinopark.bootstrap import AppContainer, bootstrap
from dinopark.domain.errors import DomainError
from dinopark.interfaces.errors import CageVersionConflictError, StoreError

logger = logging.getLogger(__name__)

MISSING_DB_URL_MSG = (
    f"{config.DB_URL_ENV_VAR} is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    f"  export {config.DB_URL_ENV_VAR}='sqlite:///park.db'\n"
    "  or in PowerShell:\n"
    f"  $env:{config.DB_URL_ENV_VAR}='sqlite:///park.db'"
)

CONFLICT_MSG = "The cage was changed by another request; please retry."


def get_app(ctx: click.Context) -> AppContainer:
    """Return the application container for this invocation."""
    root = ctx.find_root()
    if isinstance(root.obj, AppContainer):
        return root.obj
    try:
        app = bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    root.obj = app
    return app


@contextmanager
def park_errors() -> Iterator[None]:
    """Re-raise park and store failures as `click.ClickException`."""
    try:
        yield
    except DomainError as e:
        raise click.ClickException(str(e)) from e
    except CageVersionConflictError as e:
        logger.info("%s", e)
        raise click.ClickException(CONFLICT_MSG) from e
    except StoreError as e:
        logger.error("Store failure: %s", e)
        raise click.ClickException(f"Storage error: {e}") from e
