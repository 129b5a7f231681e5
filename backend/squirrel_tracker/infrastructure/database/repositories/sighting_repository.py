"""Concrete repository implementation for Sighting backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from squirrel_tracker.application.interfaces import SightingRepository
from squirrel_tracker.domain.entities import EDITABLE_FIELDS, Sighting
from squirrel_tracker.domain.exceptions import EntityNotFoundError
from squirrel_tracker.infrastructure.database.models import SightingModel


class SQLAlchemySightingRepository(SightingRepository):
    """Implements the SightingRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SightingModel) -> Sighting:
        """Map ORM model → domain entity."""
        return Sighting(
            id=model.id,
            name=model.name,
            species=model.species,
            location=model.location,
            size=model.size,
            color=model.color,
            behavior=model.behavior,
            date_spotted=model.date_spotted,
            notes=model.notes,
            is_favorite=model.is_favorite,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Sighting) -> SightingModel:
        """Map domain entity → ORM model (for creation)."""
        return SightingModel(
            id=entity.id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **entity.editable_values(),
        )

    async def get_by_id(self, sighting_id: str) -> Sighting | None:
        result = await self._session.get(SightingModel, sighting_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[Sighting]:
        stmt = select(SightingModel).order_by(SightingModel.created_at.desc()).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, sighting: Sighting) -> Sighting:
        if sighting.id is None:
            raise ValueError("Sighting must have an id before it is stored")
        model = self._to_model(sighting)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, sighting: Sighting) -> Sighting:
        model = await self._session.get(SightingModel, sighting.id)
        if model is None:
            raise EntityNotFoundError("Sighting", sighting.id or "")
        for name in EDITABLE_FIELDS:
            setattr(model, name, getattr(sighting, name))
        model.updated_at = sighting.updated_at
        await self._session.flush()
        return self._to_entity(model)
