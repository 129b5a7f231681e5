from .record_store import RecordStore, StoreResult
from .sighting_repository import SightingRepository

__all__ = [
    "RecordStore",
    "StoreResult",
    "SightingRepository",
]
