"""Abstract record store interface (port) used by the sighting controller.

The store is an opaque remote collaborator: it can list, create and
update sightings. There is no delete.

Implementations report an unsuccessful call as a failed StoreResult. The
only exception they may raise is RecordStoreError, for a response they
cannot interpret; the controller turns that into a failure notification
too, and anything else would escape it.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from squirrel_tracker.application.schemas import SightingPayload
from squirrel_tracker.domain.entities import Sighting

T = TypeVar("T")


@dataclass
class StoreResult(Generic[T]):
    """Outcome of one store call: a success flag plus payload."""

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "StoreResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "StoreResult[T]":
        return cls(success=False, error=error)


class RecordStore(ABC):
    """Port for sighting persistence as seen from the client side."""

    @property
    @abstractmethod
    def store_name(self) -> str:
        """Short identifier used in logs and errors."""
        ...

    @abstractmethod
    async def list(self) -> StoreResult[Sequence[Sighting]]:
        """Fetch every stored sighting."""
        ...

    @abstractmethod
    async def create(self, data: SightingPayload) -> StoreResult[Sighting]:
        """Store a new sighting; the store assigns its id."""
        ...

    @abstractmethod
    async def update(self, record_id: str, data: SightingPayload) -> StoreResult[Sighting]:
        """Replace the editable fields of an existing sighting."""
        ...
