"""
Change seats use case.

Checks run in a fixed order and none of them touches the webinar, so a
rejected request leaves the stored record exactly as it was:

  1. the webinar exists
  2. the caller is its organizer
  3. the seat count does not go down
  4. the seat count stays within MAX_SEATS
"""

from dataclasses import dataclass

from webinar_api.core.logging import get_logger
from webinar_api.domain.errors import InvalidSeatsError, NotOrganizerError, WebinarNotFoundError
from webinar_api.domain.user import User
from webinar_api.domain.webinar import MAX_SEATS
from webinar_api.repositories.interfaces import WebinarRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChangeSeatsCommand:
    user: User
    webinar_id: str
    seats: int


class ChangeSeats:
    def __init__(self, repository: WebinarRepository) -> None:
        self._repository = repository

    async def execute(self, command: ChangeSeatsCommand) -> None:
        webinar = await self._repository.find_by_id(command.webinar_id)
        if webinar is None:
            raise WebinarNotFoundError(command.webinar_id)

        if not webinar.is_organizer(command.user):
            logger.warning(
                "change_seats_forbidden",
                webinar_id=webinar.id,
                user_id=command.user.id,
            )
            raise NotOrganizerError(command.user.id, webinar.id)

        if command.seats < webinar.seats:
            raise InvalidSeatsError("You cannot reduce the number of seats")

        if command.seats > MAX_SEATS:
            raise InvalidSeatsError(f"Webinar must have at most {MAX_SEATS} seats")

        previous = webinar.seats
        webinar.change_seats(command.seats)
        await self._repository.update(webinar)

        logger.info(
            "webinar_seats_changed",
            webinar_id=webinar.id,
            previous_seats=previous,
            seats=webinar.seats,
        )
