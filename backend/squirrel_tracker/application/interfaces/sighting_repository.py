"""Abstract repository interface (port) for Sighting persistence."""

from abc import ABC, abstractmethod

from squirrel_tracker.domain.entities import Sighting


class SightingRepository(ABC):
    """Port for sighting persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, sighting_id: str) -> Sighting | None:
        """Retrieve a single sighting by its UUID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[Sighting]:
        """Retrieve sightings, newest first. ``limit=None`` returns all."""
        ...

    @abstractmethod
    async def create(self, sighting: Sighting) -> Sighting:
        """Persist a new sighting and return it."""
        ...

    @abstractmethod
    async def update(self, sighting: Sighting) -> Sighting:
        """Update an existing sighting."""
        ...
