"""Alembic environment for DINOPARK.

Policy defaults:
  - compare_type=True (catch column type drift)
  - compare_server_default=True (catch server default drift)
  - render_as_batch=True on SQLite (safe ALTER TABLE emulation)
  - URL precedence: `-x url=...` > config sqlalchemy.url > DINOPARK_DB_URL
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# Ensure the park tables are attached to the metadata so autogenerate sees them
import dinopark.adapters.park.sqlalchemy_adapters.schema  # noqa: F401 # pylint: disable=unused-import
from dinopark.adapters.db.metadata import metadata
from dinopark.config import DB_URL_ENV_VAR

# pylint: disable=no-member

config = context.config

# Only an alembic.ini drives logging config; the CLI configures its own.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = metadata


def get_url() -> str:
    """Resolve DB URL with precedence: `-x url` > config > env."""

    # 1) `alembic -x url=...`
    xargs = context.get_x_argument(as_dictionary=True)
    url = xargs.get("url")

    # 2) alembic.ini / programmatic config
    if not url:
        url = config.get_main_option("sqlalchemy.url")

    # 3) environment variable
    if not url or "%(" in url:  # treat placeholder as unset # pylint: disable=R2004
        url = os.environ.get(DB_URL_ENV_VAR)

    if not url:
        raise RuntimeError(f"Set {DB_URL_ENV_VAR} to your database URL.")
    return url


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Only a URL is needed, no DBAPI; statements are emitted to the script
    output instead of being executed.
    """
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against a live connection."""
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        is_sqlite = connection.dialect.name == "sqlite"  # pylint: disable=R2004
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
            render_as_batch=is_sqlite,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
