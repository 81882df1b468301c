"""Domain errors for the webinars module.

Every error carries an ``ErrorKind`` tag so the HTTP layer can map outcomes
to status codes without inspecting exception classes.
"""

from enum import Enum


class ErrorKind(Enum):
    """Failure categories surfaced by use cases."""

    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION = "VALIDATION"


class DomainError(Exception):
    """Base domain error with a kind tag and a user-safe message."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class AuthorizationError(DomainError):
    kind = ErrorKind.UNAUTHORIZED


class ValidationError(DomainError):
    kind = ErrorKind.VALIDATION


class WebinarNotFoundError(NotFoundError):
    """Raised when no webinar matches the requested id."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__("Webinar not found")
        self.webinar_id = webinar_id


class NotOrganizerError(AuthorizationError):
    """Raised when someone other than the organizer modifies a webinar."""

    def __init__(self, user_id: str, webinar_id: str) -> None:
        super().__init__("User is not allowed to update this webinar")
        self.user_id = user_id
        self.webinar_id = webinar_id


class InvalidSeatsError(ValidationError):
    """Raised when a seat count breaks the bounds or the no-reduction rule."""


class WebinarTooEarlyError(ValidationError):
    """Raised when a webinar starts too soon after being organized."""

    def __init__(self) -> None:
        super().__init__("Webinar must be scheduled at least 3 days in advance")
