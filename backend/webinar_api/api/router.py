"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from webinar_api.api.routes import webinars

api_router = APIRouter()
api_router.include_router(webinars.router)
