"""Translation of database driver failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError, OperationalError

from events.domain.errors import PersistenceError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures inside the block as PersistenceError.

    Connection loss and statement timeouts are reported as transient.
    """
    try:
        yield
    except OperationalError as exc:
        raise PersistenceError(operation, transient=True) from exc
    except DatabaseError as exc:
        raise PersistenceError(operation) from exc
