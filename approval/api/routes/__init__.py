"""Top level API router registration."""
from fastapi import APIRouter, FastAPI

from approval.api.routes import (
    companies,
    health,
    meeting_participants,
    meetings,
    participants,
    topics,
    voting,
)


def register_routes(application: FastAPI) -> None:
    """Register all API routers with the FastAPI application."""
    api_router = APIRouter(prefix="/api")

    api_router.include_router(health.router, tags=["health"])
    api_router.include_router(companies.router, prefix="/companies", tags=["companies"])
    api_router.include_router(
        participants.router, prefix="/companies/{company_id}/participants", tags=["participants"]
    )
    api_router.include_router(
        meetings.router, prefix="/companies/{company_id}/meetings", tags=["meetings"]
    )
    api_router.include_router(
        meeting_participants.router,
        prefix="/companies/{company_id}/meetings/{meeting_id}/participants",
        tags=["meeting participants"],
    )
    api_router.include_router(
        topics.router,
        prefix="/companies/{company_id}/meetings/{meeting_id}/topics",
        tags=["topics"],
    )
    api_router.include_router(
        voting.router,
        prefix="/companies/{company_id}/meetings/{meeting_id}/topics/{topic_id}/voting",
        tags=["voting"],
    )

    application.include_router(api_router)


__all__ = ["register_routes"]
