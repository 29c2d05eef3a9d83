"""Errors raised by the record-access layer and its SQL helpers."""


class JoblyError(Exception):
    """Base for request-level errors; the HTTP layer turns these into 4xx responses."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(JoblyError):
    """Raised for empty update payloads and inconsistent filter ranges."""


class ConflictError(JoblyError):
    """Raised when a create would duplicate a natural key."""


class NotFoundError(JoblyError):
    """Raised when an operation targets a row that does not exist."""
