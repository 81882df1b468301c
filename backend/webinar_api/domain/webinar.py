"""
Webinar aggregate.

The seat count must stay within (0, MAX_SEATS]; the entity checks this
whenever seats are set, so an illegal webinar can never be built.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from webinar_api.domain.errors import InvalidSeatsError
from webinar_api.domain.user import User

MAX_SEATS = 1000
MIN_NOTICE = timedelta(days=3)


def check_seats(seats: int) -> None:
    if seats <= 0:
        raise InvalidSeatsError("Webinar must have at least 1 seat")
    if seats > MAX_SEATS:
        raise InvalidSeatsError(f"Webinar must have at most {MAX_SEATS} seats")


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Webinar:
    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def __post_init__(self) -> None:
        check_seats(self.seats)
        self.start_date = as_utc(self.start_date)
        self.end_date = as_utc(self.end_date)

    def is_organizer(self, user: User) -> bool:
        return user.id == self.organizer_id

    def is_too_soon(self, now: datetime) -> bool:
        """True when the webinar starts less than MIN_NOTICE after ``now``."""
        return self.start_date - as_utc(now) < MIN_NOTICE

    def change_seats(self, seats: int) -> None:
        check_seats(seats)
        self.seats = seats
