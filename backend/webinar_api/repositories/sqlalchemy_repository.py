"""
SQLAlchemy-backed webinar repository.

Each operation runs in its own session and commits before returning; there is
no transaction spanning a read and the following write.
"""

from sqlalchemy import update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from webinar_api.core.logging import get_logger
from webinar_api.domain.webinar import Webinar
from webinar_api.models.webinar import WebinarRecord
from webinar_api.repositories.interfaces import WebinarRepository

logger = get_logger(__name__)


def to_domain(record: WebinarRecord) -> Webinar:
    return Webinar(
        id=record.id,
        organizer_id=record.organizer_id,
        title=record.title,
        start_date=record.start_date,
        end_date=record.end_date,
        seats=record.seats,
    )


def to_record(webinar: Webinar) -> WebinarRecord:
    return WebinarRecord(
        id=webinar.id,
        organizer_id=webinar.organizer_id,
        title=webinar.title,
        start_date=webinar.start_date,
        end_date=webinar.end_date,
        seats=webinar.seats,
    )


class SqlAlchemyWebinarRepository(WebinarRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, webinar: Webinar) -> None:
        async with self._session_factory() as session:
            session.add(to_record(webinar))
            await session.commit()
        logger.debug("webinar_inserted", webinar_id=webinar.id)

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        async with self._session_factory() as session:
            record = await session.get(WebinarRecord, webinar_id)
            return to_domain(record) if record else None

    async def update(self, webinar: Webinar) -> None:
        async with self._session_factory() as session:
            await session.execute(
                sql_update(WebinarRecord)
                .where(WebinarRecord.id == webinar.id)
                .values(
                    title=webinar.title,
                    seats=webinar.seats,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    organizer_id=webinar.organizer_id,
                )
            )
            await session.commit()
        logger.debug("webinar_updated", webinar_id=webinar.id, seats=webinar.seats)
