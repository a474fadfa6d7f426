"""Translation of SQLAlchemy driver errors into store errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError

from dinopark.interfaces.errors import StoreUnavailableError

EMPTY_STRING = ""  # pragma: no mutate


def integrity_message(integrity_error: IntegrityError) -> str:
    """Return the driver message of an IntegrityError, lower-cased."""
    msg = (
        str(integrity_error.orig)
        if integrity_error.orig not in (None, EMPTY_STRING)
        else str(integrity_error)
    )
    return msg.lower()


@contextmanager
def unavailable_on_dbapi_error() -> Iterator[None]:
    """Re-raise driver-level failures as `StoreUnavailableError`.

    IntegrityErrors are left alone; callers translate them where the
    constraint that fired carries meaning.
    """
    try:
        yield
    except IntegrityError:
        raise
    except DBAPIError as e:  # OperationalError, InterfaceError, ...
        raise StoreUnavailableError(str(e)) from e
