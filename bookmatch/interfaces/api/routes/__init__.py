from fastapi import APIRouter, FastAPI

from .auth import router as auth_router
from .books import router as books_router
from .health import router as health_router
from .match import router as match_router
from .notifications import router as notifications_router
from .realtime import router as realtime_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    api = APIRouter(prefix=API_PREFIX)
    api.include_router(auth_router)
    api.include_router(books_router)
    api.include_router(match_router)
    api.include_router(notifications_router)

    app.include_router(health_router)
    app.include_router(api)
    app.include_router(realtime_router)
