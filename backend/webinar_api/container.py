"""
Application container.

Builds the object graph (engine, repository, generators, use cases) once at
startup. The result lives on ``app.state.container`` and reaches routes through
FastAPI dependencies instead of a module-level singleton.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from webinar_api.core.config import Settings
from webinar_api.core.generators import DateGenerator, IdGenerator, RealDateGenerator, RealIdGenerator
from webinar_api.db.session import create_engine_from_settings, create_session_factory
from webinar_api.repositories.interfaces import WebinarRepository
from webinar_api.repositories.sqlalchemy_repository import SqlAlchemyWebinarRepository
from webinar_api.services.change_seats import ChangeSeats
from webinar_api.services.organize_webinar import OrganizeWebinar


@dataclass
class AppContainer:
    webinar_repository: WebinarRepository
    organize_webinar: OrganizeWebinar
    change_seats: ChangeSeats
    engine: AsyncEngine | None = None

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def wire(
    repository: WebinarRepository,
    id_generator: IdGenerator | None = None,
    date_generator: DateGenerator | None = None,
    engine: AsyncEngine | None = None,
) -> AppContainer:
    """Assemble use cases around an already-built repository."""
    return AppContainer(
        webinar_repository=repository,
        organize_webinar=OrganizeWebinar(
            repository,
            id_generator or RealIdGenerator(),
            date_generator or RealDateGenerator(),
        ),
        change_seats=ChangeSeats(repository),
        engine=engine,
    )


def build_container(settings: Settings) -> AppContainer:
    """Production wiring: SQLAlchemy repository over the configured database."""
    engine = create_engine_from_settings(settings)
    repository = SqlAlchemyWebinarRepository(create_session_factory(engine))
    return wire(repository, engine=engine)
