"""Read-only detail display slot."""

from squirrel_tracker.domain.entities import Sighting


class DetailViewer:
    """Holds at most one sighting for display. Viewing never mutates data."""

    def __init__(self) -> None:
        self.sighting: Sighting | None = None

    @property
    def is_open(self) -> bool:
        return self.sighting is not None

    @property
    def title(self) -> str:
        return f"🐿️ {self.sighting.name}" if self.sighting else ""

    @property
    def favorite_label(self) -> str:
        if self.sighting is None:
            return ""
        return "❤️ Yes" if self.sighting.is_favorite else "🤍 No"

    def open(self, sighting: Sighting) -> None:
        self.sighting = sighting

    def close(self) -> None:
        self.sighting = None
