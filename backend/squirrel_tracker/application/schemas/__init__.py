from .sighting import (
    SightingEnvelope,
    SightingForm,
    SightingListEnvelope,
    SightingPayload,
    SightingResponse,
)

__all__ = [
    "SightingEnvelope",
    "SightingForm",
    "SightingListEnvelope",
    "SightingPayload",
    "SightingResponse",
]
