"""In-memory queue of transient notifications raised by sighting actions."""

import logging
from collections import deque

from squirrel_tracker.domain.entities import FailureKind, Notification, NotificationLevel

logger = logging.getLogger(__name__)


class Notifier:
    """Ring buffer of recent notifications for the presentation layer to show.

    Messages are transient: the UI pops them once, and the oldest fall off
    when the buffer is full.
    """

    def __init__(self, max_items: int = 25) -> None:
        self._items: deque[Notification] = deque(maxlen=max_items)

    def success(self, message: str) -> Notification:
        notification = Notification(level=NotificationLevel.SUCCESS, message=message)
        self._items.append(notification)
        logger.debug("Notification: %s", message)
        return notification

    def failure(self, kind: FailureKind, message: str, detail: str | None = None) -> Notification:
        notification = Notification(
            level=NotificationLevel.ERROR,
            message=message,
            failure=kind,
            detail=detail,
        )
        self._items.append(notification)
        logger.warning("%s: %s (%s)", kind.value, message, detail or "no detail")
        return notification

    def items(self) -> list[Notification]:
        return list(self._items)

    @property
    def latest(self) -> Notification | None:
        return self._items[-1] if self._items else None

    def drain(self) -> list[Notification]:
        """Return every pending notification and forget them."""
        pending = list(self._items)
        self._items.clear()
        return pending
