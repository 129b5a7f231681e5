"""Domain entity — a single squirrel sighting and its enumerated vocabularies."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any


class Species(str, Enum):
    """Species a sighting can be filed under."""

    GRAY = "Gray Squirrel"
    RED = "Red Squirrel"
    FLYING = "Flying Squirrel"
    GROUND = "Ground Squirrel"
    FOX = "Fox Squirrel"
    CHIPMUNK = "Chipmunk"
    TREE = "Tree Squirrel"
    OTHER = "Other"


class Size(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class Color(str, Enum):
    GRAY = "Gray"
    BROWN = "Brown"
    RED = "Red"
    BLACK = "Black"
    WHITE = "White"
    MIXED = "Mixed"


class Behavior(str, Enum):
    FORAGING = "Foraging for nuts"
    CLIMBING = "Climbing trees"
    NESTING = "Building nest"
    PLAYING = "Playing"
    SLEEPING = "Sleeping"
    EATING = "Eating"
    RUNNING = "Running"
    JUMPING = "Jumping between trees"
    BURYING = "Burying food"
    GROOMING = "Grooming"


EDITABLE_FIELDS = (
    "name",
    "species",
    "location",
    "size",
    "color",
    "behavior",
    "date_spotted",
    "notes",
    "is_favorite",
)


@dataclass
class Sighting:
    """Core domain entity for one observed squirrel.

    A sighting without an ``id`` is "new" and only exists as form input.
    Once the store assigns an id the sighting is "persisted" and the id
    never changes.
    """

    name: str
    species: str
    location: str
    size: str | None = None
    color: str | None = None
    behavior: str | None = None
    date_spotted: date | None = None
    notes: str | None = None
    is_favorite: bool = False
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def with_favorite(self, is_favorite: bool) -> "Sighting":
        """Return a copy with the favorite flag set; the original is untouched."""
        return replace(self, is_favorite=is_favorite)

    def editable_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in EDITABLE_FIELDS}

    def update(self, **changes: Any) -> None:
        """Overwrite editable fields and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name not in EDITABLE_FIELDS:
                raise AttributeError(f"Sighting field '{name}' is not editable")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class SightingDraft:
    """Working copy of the add/edit form.

    Every field is optional so that half-filled or invalid input can be
    held while the user is still typing.
    """

    name: str = ""
    species: str | None = None
    location: str = ""
    size: str | None = None
    color: str | None = None
    behavior: str | None = None
    date_spotted: date | None = None
    notes: str | None = None
    is_favorite: bool | None = None

    @classmethod
    def from_sighting(cls, sighting: Sighting) -> "SightingDraft":
        return cls(**sighting.editable_values())


@dataclass(frozen=True)
class SightingStats:
    """Figures shown in the statistics header."""

    total_count: int
    unique_species_count: int
    favorite_count: int

    @classmethod
    def from_sightings(cls, sightings: list[Sighting]) -> "SightingStats":
        return cls(
            total_count=len(sightings),
            unique_species_count=len({s.species for s in sightings}),
            favorite_count=sum(1 for s in sightings if s.is_favorite),
        )
