"""
Webinar repository interface and its adapters.
"""

from .interfaces import WebinarRepository
from .in_memory import InMemoryWebinarRepository
from .sqlalchemy_repository import SqlAlchemyWebinarRepository

__all__ = ['WebinarRepository', 'InMemoryWebinarRepository', 'SqlAlchemyWebinarRepository']
