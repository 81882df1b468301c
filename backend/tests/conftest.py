"""
Pytest fixtures for repositories, use cases and the HTTP client.

SQL-backed tests run against a fresh in-memory SQLite database per test
(aiosqlite + StaticPool, so every session shares the one connection).
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from webinar_api.api.deps import get_current_user
from webinar_api.container import AppContainer, wire
from webinar_api.core.generators import FixedIdGenerator
from webinar_api.db.base import Base
from webinar_api.db.session import create_session_factory
from webinar_api.domain.user import User
from webinar_api.domain.webinar import Webinar
from webinar_api.main import create_app
from webinar_api.repositories.in_memory import InMemoryWebinarRepository
from webinar_api.repositories.sqlalchemy_repository import SqlAlchemyWebinarRepository

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class UserSeeds:
    alice = User(id="alice", email="alice@example.com")
    bob = User(id="bob", email="bob@example.com")


@pytest.fixture
def users() -> type[UserSeeds]:
    return UserSeeds


@pytest.fixture
def webinar() -> Webinar:
    """A 100-seat webinar organized by alice."""
    return Webinar(
        id="webinar-id",
        organizer_id=UserSeeds.alice.id,
        title="Webinar title",
        start_date=datetime(2024, 1, 10, 10, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 10, 11, tzinfo=timezone.utc),
        seats=100,
    )


@pytest.fixture
def memory_repository(webinar: Webinar) -> InMemoryWebinarRepository:
    return InMemoryWebinarRepository([webinar])


@pytest.fixture
def id_generator() -> FixedIdGenerator:
    return FixedIdGenerator("id-1")


@pytest_asyncio.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield engine, then dispose for isolation."""
    test_engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool, echo=False)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def sql_repository(session_factory) -> SqlAlchemyWebinarRepository:
    return SqlAlchemyWebinarRepository(session_factory)


@pytest.fixture
def container(sql_repository: SqlAlchemyWebinarRepository) -> AppContainer:
    # Real id and date generators, as in production wiring
    return wire(sql_repository)


@pytest_asyncio.fixture(scope="function")
async def client(container: AppContainer) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client over an app wired to the test database, acting as test-user."""
    app = create_app(container=container)
    app.dependency_overrides[get_current_user] = lambda: User(id="test-user")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
