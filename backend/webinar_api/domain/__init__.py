from webinar_api.domain.errors import (
    AuthorizationError,
    DomainError,
    ErrorKind,
    InvalidSeatsError,
    NotFoundError,
    NotOrganizerError,
    ValidationError,
    WebinarNotFoundError,
    WebinarTooEarlyError,
)
from webinar_api.domain.user import User
from webinar_api.domain.webinar import MAX_SEATS, Webinar

__all__ = [
    "Webinar",
    "User",
    "MAX_SEATS",
    "ErrorKind",
    "DomainError",
    "NotFoundError",
    "AuthorizationError",
    "ValidationError",
    "WebinarNotFoundError",
    "NotOrganizerError",
    "InvalidSeatsError",
    "WebinarTooEarlyError",
]
