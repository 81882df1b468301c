"""
Application use cases. Each depends on the repository interface only.
"""

from .organize_webinar import OrganizeWebinar, OrganizeWebinarCommand, OrganizeWebinarResult
from .change_seats import ChangeSeats, ChangeSeatsCommand

__all__ = [
    'OrganizeWebinar', 'OrganizeWebinarCommand', 'OrganizeWebinarResult',
    'ChangeSeats', 'ChangeSeatsCommand',
]
