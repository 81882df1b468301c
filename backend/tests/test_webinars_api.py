"""
End-to-end tests for the webinar routes.
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from webinar_api.models.webinar import WebinarRecord


async def seed_webinar(session_factory, webinar_id: str, organizer_id: str = "test-user", seats: int = 10):
    now = datetime.now(timezone.utc)
    async with session_factory() as session:
        session.add(
            WebinarRecord(
                id=webinar_id,
                title="Webinar Test",
                seats=seats,
                start_date=now,
                end_date=now,
                organizer_id=organizer_id,
            )
        )
        await session.commit()


async def stored_seats(session_factory, webinar_id: str) -> int:
    async with session_factory() as session:
        return (await session.get(WebinarRecord, webinar_id)).seats


@pytest.mark.asyncio
async def test_update_webinar_seats(client: AsyncClient, session_factory):
    await seed_webinar(session_factory, "test-webinar")

    response = await client.post("/webinars/test-webinar/seats", json={"seats": "30"})

    assert response.status_code == 200
    assert response.json() == {"message": "Seats updated"}
    assert await stored_seats(session_factory, "test-webinar") == 30


@pytest.mark.asyncio
async def test_update_seats_accepts_number(client: AsyncClient, session_factory):
    await seed_webinar(session_factory, "test-webinar")

    response = await client.post("/webinars/test-webinar/seats", json={"seats": 40})

    assert response.status_code == 200
    assert await stored_seats(session_factory, "test-webinar") == 40


@pytest.mark.asyncio
async def test_update_seats_webinar_not_found(client: AsyncClient):
    response = await client.post("/webinars/non-existent-id/seats", json={"seats": "30"})

    assert response.status_code == 404
    assert response.json() == {"error": "Webinar not found"}


@pytest.mark.asyncio
async def test_update_seats_not_organizer(client: AsyncClient, session_factory):
    await seed_webinar(session_factory, "test-webinar-not-organizer", organizer_id="other-user")

    response = await client.post("/webinars/test-webinar-not-organizer/seats", json={"seats": "30"})

    assert response.status_code == 401
    assert response.json() == {"error": "User is not allowed to update this webinar"}
    assert await stored_seats(session_factory, "test-webinar-not-organizer") == 10


@pytest.mark.asyncio
async def test_update_seats_reduce_is_bad_request(client: AsyncClient, session_factory):
    await seed_webinar(session_factory, "test-webinar", seats=100)

    response = await client.post("/webinars/test-webinar/seats", json={"seats": "50"})

    assert response.status_code == 400
    assert response.json() == {"error": "You cannot reduce the number of seats"}
    assert await stored_seats(session_factory, "test-webinar") == 100


@pytest.mark.asyncio
async def test_update_seats_above_limit_is_bad_request(client: AsyncClient, session_factory):
    await seed_webinar(session_factory, "test-webinar", seats=100)

    response = await client.post("/webinars/test-webinar/seats", json={"seats": "1001"})

    assert response.status_code == 400
    assert response.json() == {"error": "Webinar must have at most 1000 seats"}
    assert await stored_seats(session_factory, "test-webinar") == 100


@pytest.mark.asyncio
async def test_update_seats_non_numeric_body(client: AsyncClient, session_factory):
    await seed_webinar(session_factory, "test-webinar")

    response = await client.post("/webinars/test-webinar/seats", json={"seats": "many"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_organize_webinar(client: AsyncClient, session_factory):
    response = await client.post(
        "/webinars",
        json={
            "title": "New Webinar",
            "seats": 50,
            "startDate": "2050-01-01T00:00:00Z",
            "endDate": "2050-01-01T01:00:00Z",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id"}

    async with session_factory() as session:
        record = await session.get(WebinarRecord, body["id"])
    assert record is not None
    assert record.title == "New Webinar"
    assert record.seats == 50
    assert record.organizer_id == "test-user"


@pytest.mark.asyncio
async def test_organize_webinar_too_many_seats(client: AsyncClient):
    response = await client.post(
        "/webinars",
        json={
            "title": "Huge Webinar",
            "seats": 5000,
            "startDate": "2050-01-01T00:00:00Z",
            "endDate": "2050-01-01T01:00:00Z",
        },
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Webinar must have at most 1000 seats"}


@pytest.mark.asyncio
async def test_organize_webinar_too_early(client: AsyncClient):
    start = datetime.now(timezone.utc) + timedelta(days=1)
    response = await client.post(
        "/webinars",
        json={
            "title": "Tomorrow",
            "seats": 20,
            "startDate": start.isoformat(),
            "endDate": (start + timedelta(hours=1)).isoformat(),
        },
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Webinar must be scheduled at least 3 days in advance"}


@pytest.mark.asyncio
async def test_organize_webinar_unexpected_failure(client: AsyncClient, container, monkeypatch):
    async def broken_create(webinar):
        raise RuntimeError("database is gone")

    monkeypatch.setattr(container.webinar_repository, "create", broken_create)

    response = await client.post(
        "/webinars",
        json={
            "title": "New Webinar",
            "seats": 50,
            "startDate": "2050-01-01T00:00:00Z",
            "endDate": "2050-01-01T01:00:00Z",
        },
    )

    assert response.status_code == 500
    assert response.json() == {"error": "An error occurred"}


@pytest.mark.asyncio
async def test_health_and_request_id(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["X-Request-ID"] == "abc123"
    assert response.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_metrics_endpoint(client: AsyncClient):
    await client.post("/webinars/non-existent-id/seats", json={"seats": "30"})

    response = await client.get("/metrics")

    assert response.status_code == 200
    assert "webinar_operations_total" in response.text


@pytest.mark.asyncio
async def test_update_seats_unexpected_failure(client: AsyncClient, container, session_factory, monkeypatch):
    await seed_webinar(session_factory, "test-webinar")

    async def broken_find_by_id(webinar_id):
        raise RuntimeError("database is gone")

    monkeypatch.setattr(container.webinar_repository, "find_by_id", broken_find_by_id)

    response = await client.post("/webinars/test-webinar/seats", json={"seats": "30"})

    assert response.status_code == 500
    assert response.json() == {"error": "An error occurred"}
    assert await stored_seats(session_factory, "test-webinar") == 10
