"""Translate record-access errors to HTTP responses."""

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

from jobly.db.sql import DatabaseConnectionError
from jobly.errors import JoblyError, NotFoundError


def to_http(exc: JoblyError) -> HTTPException:
    # Conflicts and invalid requests are both client errors (400).
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


@contextmanager
def http_errors() -> Iterator[None]:
    """Re-raise record-access and connectivity errors as HTTPException."""
    try:
        yield
    except JoblyError as exc:
        raise to_http(exc) from exc
    except DatabaseConnectionError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
