"""Sighting record store endpoints: list, create, update.

There is intentionally no DELETE route; removal is a client-side action.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from squirrel_tracker.application.schemas import (
    SightingEnvelope,
    SightingListEnvelope,
    SightingPayload,
    SightingResponse,
)
from squirrel_tracker.application.services import SightingService
from squirrel_tracker.domain.exceptions import EntityNotFoundError
from squirrel_tracker.infrastructure.dependencies import get_sighting_service

router = APIRouter(prefix="/sightings", tags=["Sightings"])


@router.get("", response_model=SightingListEnvelope)
async def list_sightings(
    service: SightingService = Depends(get_sighting_service),
) -> SightingListEnvelope:
    """Return every sighting, newest first."""
    sightings = await service.list_sightings()
    return SightingListEnvelope(
        success=True,
        data=[SightingResponse.model_validate(s, from_attributes=True) for s in sightings],
    )


@router.post("", response_model=SightingEnvelope, status_code=status.HTTP_201_CREATED)
async def create_sighting(
    data: SightingPayload,
    service: SightingService = Depends(get_sighting_service),
) -> SightingEnvelope:
    """Store a new sighting; the id is assigned here."""
    sighting = await service.create_sighting(data)
    return SightingEnvelope(
        success=True,
        data=SightingResponse.model_validate(sighting, from_attributes=True),
    )


@router.put("/{sighting_id}", response_model=SightingEnvelope)
async def update_sighting(
    sighting_id: str,
    data: SightingPayload,
    service: SightingService = Depends(get_sighting_service),
) -> SightingEnvelope:
    """Replace the editable fields of an existing sighting."""
    try:
        sighting = await service.update_sighting(sighting_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SightingEnvelope(
        success=True,
        data=SightingResponse.model_validate(sighting, from_attributes=True),
    )
