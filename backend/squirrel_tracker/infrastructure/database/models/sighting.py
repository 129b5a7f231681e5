"""SQLAlchemy ORM model for the Sighting entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from squirrel_tracker.infrastructure.database.base import Base


class SightingModel(Base):
    """ORM model — maps to the 'sightings' table."""

    __tablename__ = "sightings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    size: Mapped[str | None] = mapped_column(String(50), nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    behavior: Mapped[str | None] = mapped_column(String(100), nullable=True)
    date_spotted: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_sightings_species", "species"),
        Index("ix_sightings_created", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<SightingModel(id={self.id}, "
            f"name='{self.name}', species='{self.species}')>"
        )
