"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from squirrel_tracker.presentation.api.v1.endpoints.health import router as health_router
from squirrel_tracker.presentation.api.v1.endpoints.sightings import router as sightings_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(sightings_router)
