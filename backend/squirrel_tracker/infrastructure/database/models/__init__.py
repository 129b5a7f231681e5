from .sighting import SightingModel

__all__ = [
    "SightingModel",
]
