"""API routers."""

from app.routers.auth import router as auth_router
from app.routers.lecture_summaries import router as lecture_summaries_router

__all__ = ["auth_router", "lecture_summaries_router"]
