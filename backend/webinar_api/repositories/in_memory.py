"""
Dict-backed webinar repository used by unit tests.
"""

from dataclasses import replace
from typing import Iterable

from webinar_api.domain.webinar import Webinar
from webinar_api.repositories.interfaces import WebinarRepository


class InMemoryWebinarRepository(WebinarRepository):
    """Stores copies so callers never share an instance with the store."""

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._webinars: dict[str, Webinar] = {w.id: replace(w) for w in webinars}

    async def create(self, webinar: Webinar) -> None:
        self._webinars[webinar.id] = replace(webinar)

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar else None

    async def update(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            self._webinars[webinar.id] = replace(webinar)

    def find_by_id_sync(self, webinar_id: str) -> Webinar | None:
        """Peek at stored state without awaiting; handy in assertions."""
        webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar else None

    def __len__(self) -> int:
        return len(self._webinars)
