"""Liveness probe for the record store service."""

from fastapi import APIRouter

from squirrel_tracker.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report service name, version and environment; never touches the database."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
