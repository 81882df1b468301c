"""
FastAPI dependencies shared by route modules.
"""

from fastapi import Depends, Request

from webinar_api.container import AppContainer
from webinar_api.core.config import Settings, get_settings
from webinar_api.domain.user import User


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_current_user(settings: Settings = Depends(get_settings)) -> User:
    """
    Acting user for the request.

    There is no authentication yet, so every request acts as the configured
    default user. Tests swap this out via ``app.dependency_overrides``.
    """
    return User(id=settings.DEFAULT_USER_ID)
