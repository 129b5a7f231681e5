"""Domain entity for transient user-facing notifications."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class FailureKind(str, Enum):
    """Which store interaction a failure notification belongs to."""

    LOAD = "load_failure"
    SAVE = "save_failure"
    TOGGLE = "toggle_failure"


@dataclass(frozen=True)
class Notification:
    """A short message the user sees once; never fatal, never retried."""

    level: NotificationLevel
    message: str
    failure: FailureKind | None = None
    detail: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_error(self) -> bool:
        return self.level is NotificationLevel.ERROR
