from .sighting_repository import SQLAlchemySightingRepository

__all__ = [
    "SQLAlchemySightingRepository",
]
