"""
Organize webinar use case.

Seat bounds are enforced by the Webinar entity itself; this layer adds the
scheduling notice rule, which needs the injected clock.
"""

from dataclasses import dataclass
from datetime import datetime

from webinar_api.core.generators import DateGenerator, IdGenerator
from webinar_api.core.logging import get_logger
from webinar_api.domain.errors import WebinarTooEarlyError
from webinar_api.domain.webinar import Webinar
from webinar_api.repositories.interfaces import WebinarRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class OrganizeWebinarCommand:
    user_id: str
    title: str
    seats: int
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class OrganizeWebinarResult:
    id: str


class OrganizeWebinar:
    def __init__(
        self,
        repository: WebinarRepository,
        id_generator: IdGenerator,
        date_generator: DateGenerator,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._date_generator = date_generator

    async def execute(self, command: OrganizeWebinarCommand) -> OrganizeWebinarResult:
        """
        Create a webinar owned by ``command.user_id``.

        Raises:
            InvalidSeatsError: seats outside (0, 1000].
            WebinarTooEarlyError: start is less than 3 days away.
        """
        webinar = Webinar(
            id=self._id_generator.generate(),
            organizer_id=command.user_id,
            title=command.title,
            start_date=command.start_date,
            end_date=command.end_date,
            seats=command.seats,
        )

        if webinar.is_too_soon(self._date_generator.now()):
            raise WebinarTooEarlyError()

        await self._repository.create(webinar)

        logger.info(
            "webinar_organized",
            webinar_id=webinar.id,
            organizer_id=webinar.organizer_id,
            seats=webinar.seats,
        )
        return OrganizeWebinarResult(id=webinar.id)
