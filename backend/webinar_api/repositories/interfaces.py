"""
Webinar repository interface.
Use cases depend on this contract only; adapters decide where state lives.
"""

from abc import ABC, abstractmethod

from webinar_api.domain.webinar import Webinar


class WebinarRepository(ABC):
    """
    Persistence contract for webinars.

    Implementations:
    - InMemoryWebinarRepository: dict-backed, for unit tests
    - SqlAlchemyWebinarRepository: relational store, for production
    """

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """Persist a new webinar. The id is assumed to be unique."""
        pass

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Return the webinar with this id, or None if there is none."""
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """Overwrite the stored state of the webinar with the same id."""
        pass
