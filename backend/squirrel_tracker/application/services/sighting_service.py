"""Application service (use case) behind the record store HTTP API."""

import logging
from datetime import date
from uuid import uuid4

from squirrel_tracker.application.interfaces import SightingRepository
from squirrel_tracker.application.schemas import SightingPayload
from squirrel_tracker.domain.entities import Sighting
from squirrel_tracker.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class SightingService:
    """Orchestrates list/create/update. Depends on the repository port (DI)."""

    def __init__(self, repository: SightingRepository):
        self._repository = repository

    async def get_sighting(self, sighting_id: str) -> Sighting:
        sighting = await self._repository.get_by_id(sighting_id)
        if sighting is None:
            raise EntityNotFoundError("Sighting", sighting_id)
        return sighting

    async def list_sightings(self, skip: int = 0, limit: int | None = None) -> list[Sighting]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_sighting(self, data: SightingPayload) -> Sighting:
        sighting = Sighting(
            id=str(uuid4()),
            name=data.name,
            species=data.species,
            location=data.location,
            size=data.size,
            color=data.color,
            behavior=data.behavior,
            date_spotted=data.date_spotted or date.today(),
            notes=data.notes,
            is_favorite=data.is_favorite,
        )
        created = await self._repository.create(sighting)
        logger.info("Created sighting %s (%s)", created.id, created.species)
        return created

    async def update_sighting(self, sighting_id: str, data: SightingPayload) -> Sighting:
        sighting = await self.get_sighting(sighting_id)

        changes = data.model_dump()
        # An update never clears the date; keep the stored one when omitted
        if changes["date_spotted"] is None:
            changes["date_spotted"] = sighting.date_spotted

        sighting.update(**changes)
        updated = await self._repository.update(sighting)
        logger.info("Updated sighting %s (favorite=%s)", updated.id, updated.is_favorite)
        return updated
