"""Domain errors raised by the tracker core.

Each error carries the HTTP status it maps to so the API layer can translate
it without knowing about individual operations.
"""

from fastapi import status


class TrackerError(Exception):
    """Base class for tracker errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ValidationError(TrackerError):
    """A required field is empty or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"detail": self.message, "field": self.field}


class DuplicateNameError(TrackerError):
    """A category with the same name (case-insensitive) already exists."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(TrackerError):
    """The referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ProtectedEntityError(TrackerError):
    """Illegal mutation of the Unsorted sentinel category."""

    status_code = status.HTTP_403_FORBIDDEN


class PersistenceError(TrackerError):
    """The storage backend failed; the operation may be retried."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
