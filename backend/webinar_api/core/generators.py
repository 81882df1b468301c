"""
Id and clock collaborators injected into use cases.
Real implementations are wired by the container; fixed ones make tests deterministic.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone


class IdGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Return a new unique identifier."""
        pass


class DateGenerator(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware datetime."""
        pass


class RealIdGenerator(IdGenerator):
    def generate(self) -> str:
        return str(uuid.uuid4())


class RealDateGenerator(DateGenerator):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedIdGenerator(IdGenerator):
    """Always hands out the same id."""

    def __init__(self, value: str = "id-1") -> None:
        self.value = value

    def generate(self) -> str:
        return self.value


class FixedDateGenerator(DateGenerator):
    """Frozen clock."""

    def __init__(self, value: datetime) -> None:
        self.value = value

    def now(self) -> datetime:
        return self.value
