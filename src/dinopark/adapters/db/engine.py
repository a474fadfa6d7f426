"""Engine construction for the park store.

Every engine the park uses (CLI, bootstrap, tests) comes from `make_engine`,
so SQLite connections always enforce the dinosaur -> cage and
dinosaur -> species foreign keys. PostgreSQL engines are returned untouched;
cage row locks there come from ``SELECT ... FOR UPDATE``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

#: Applied in order on every new SQLite DBAPI connection.
SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
)


def is_sqlite(url: str | URL) -> bool:
    """Tell whether `url` points at a SQLite database."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def _apply_sqlite_pragmas(dbapi_conn: SQLiteConnection, _conn_record) -> None:
    cur = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cur.execute(f"PRAGMA {pragma};")
    finally:
        cur.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create the engine for a park database.

    For SQLite the `SQLITE_PRAGMAS` are installed through a ``connect``
    listener. WAL lets readers of cage listings proceed while a placement
    holds the write lock.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
