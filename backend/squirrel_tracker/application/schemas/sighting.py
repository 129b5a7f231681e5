"""Pydantic DTOs (Data Transfer Objects) for the Sighting feature.

Wire names are camelCase (``dateSpotted``, ``isFavorite``); Python code
uses snake_case. Both spellings are accepted on input.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from squirrel_tracker.domain.entities import Species

_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class SightingForm(BaseModel):
    """Validated add/edit form input.

    Only ``name``, ``species`` and ``location`` can block a submission. The
    optional selects offer the Size, Color and Behavior vocabularies, but a
    stored record may carry any other value and is saved back unchanged.
    """

    name: str = Field(..., min_length=1, examples=["Nutkin"])
    species: Species = Field(..., examples=["Gray Squirrel"])
    location: str = Field(..., min_length=1, examples=["Central Park"])
    size: str | None = None
    color: str | None = None
    behavior: str | None = None
    date_spotted: date | None = None
    notes: str | None = None
    is_favorite: bool | None = None

    model_config = {"str_strip_whitespace": True}

    @field_validator("species", "size", "color", "behavior", "date_spotted", "notes", mode="before")
    @classmethod
    def _empty_selection_is_none(cls, value: Any) -> Any:
        return _blank_to_none(value)


class SightingPayload(BaseModel):
    """Record input sent to the store on create and update.

    Updates replace every editable field, so the same shape serves both.
    """

    name: str = Field(..., min_length=1, max_length=200)
    species: str = Field(..., min_length=1, max_length=50)
    location: str = Field(..., min_length=1, max_length=255)
    size: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=50)
    behavior: str | None = Field(None, max_length=100)
    date_spotted: date | None = Field(None, examples=["2026-10-18"])
    notes: str | None = None
    is_favorite: bool = False

    model_config = _CAMEL_CONFIG


class SightingResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    species: str
    location: str
    size: str | None
    color: str | None
    behavior: str | None
    date_spotted: date | None
    notes: str | None
    is_favorite: bool
    created_at: datetime
    updated_at: datetime

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}


class SightingEnvelope(BaseModel):
    """``{success, data}`` wrapper for a single sighting."""

    success: bool
    data: SightingResponse | None = None
    error: str | None = None


class SightingListEnvelope(BaseModel):
    """``{success, data}`` wrapper for the full sighting list."""

    success: bool
    data: list[SightingResponse] = Field(default_factory=list)
    error: str | None = None
