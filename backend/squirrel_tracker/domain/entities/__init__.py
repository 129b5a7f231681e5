from .sighting import (
    Behavior,
    Color,
    EDITABLE_FIELDS,
    Sighting,
    SightingDraft,
    SightingStats,
    Size,
    Species,
)
from .notification import FailureKind, Notification, NotificationLevel

__all__ = [
    "Behavior",
    "Color",
    "EDITABLE_FIELDS",
    "Sighting",
    "SightingDraft",
    "SightingStats",
    "Size",
    "Species",
    "FailureKind",
    "Notification",
    "NotificationLevel",
]
