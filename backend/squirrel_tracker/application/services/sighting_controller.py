"""Client-side controller that owns the displayed sighting list.

The local list is a read-through copy of the store: every successful
create, update or favorite toggle is followed by a full ``refresh()``
instead of patching the list in place. The one exception is ``remove()``,
which only drops the row locally because the store has no delete.
"""

import math
from collections.abc import Awaitable, Callable
from datetime import date

from squirrel_tracker.application.interfaces import RecordStore, StoreResult
from squirrel_tracker.application.schemas import SightingForm, SightingPayload
from squirrel_tracker.application.services.notifier import Notifier
from squirrel_tracker.domain.entities import FailureKind, Sighting, SightingStats
from squirrel_tracker.domain.exceptions import RecordStoreError
from squirrel_tracker.infrastructure.logging.lifecycle_logger import LifecycleLogger, LifecycleStage

plog = LifecycleLogger("SightingController")

LOAD_FAILED = "Failed to load squirrels"
SAVE_FAILED = "Failed to save squirrel"
TOGGLE_FAILED = "Failed to update favorite status"
CREATED = "Squirrel added successfully!"
UPDATED = "Squirrel updated successfully!"
FAVORITED = "Added to favorites!"
UNFAVORITED = "Removed from favorites!"
REMOVED = "Squirrel removed!"


def payload_from_sighting(sighting: Sighting) -> SightingPayload:
    return SightingPayload(**sighting.editable_values())


class SightingController:
    """Single source of truth for the sighting table and statistics header.

    Each store call is awaited; nothing is queued, de-duplicated or
    cancelled, so when two refreshes overlap the last one to finish wins.
    """

    def __init__(
        self,
        store: RecordStore,
        notifier: Notifier | None = None,
        *,
        page_size: int = 10,
        today: Callable[[], date] = date.today,
    ):
        self._store = store
        self._notifier = notifier if notifier is not None else Notifier()
        self._page_size = page_size
        self._today = today
        self._sightings: list[Sighting] = []
        self.loading = False

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def sightings(self) -> list[Sighting]:
        return list(self._sightings)

    # ── Store-backed actions ────────────────────────────────────────

    async def refresh(self) -> bool:
        """Replace the local list with the store's list.

        On failure the previous list is kept as-is.
        """
        plog.step_start(LifecycleStage.REFRESH, "Loading sightings")
        self.loading = True
        try:
            result = await self._call(self._store.list())
        finally:
            self.loading = False

        if not result.success:
            plog.step_error(LifecycleStage.REFRESH, "List failed, keeping previous list", result.error)
            self._notifier.failure(FailureKind.LOAD, LOAD_FAILED, result.error)
            return False

        self._sightings = list(result.data or [])
        plog.step_complete(LifecycleStage.REFRESH, "Sightings loaded", count=len(self._sightings))
        stats = self.stats()
        plog.stats(
            total=stats.total_count,
            species=stats.unique_species_count,
            favorites=stats.favorite_count,
        )
        return True

    def build_payload(self, values: SightingForm) -> SightingPayload:
        """Fill in the date (today) and favorite flag (False) when omitted."""
        return SightingPayload(
            name=values.name,
            species=values.species.value,
            location=values.location,
            size=values.size,
            color=values.color,
            behavior=values.behavior,
            date_spotted=values.date_spotted or self._today(),
            notes=values.notes,
            is_favorite=values.is_favorite or False,
        )

    async def submit(self, values: SightingForm, editing_id: str | None = None) -> bool:
        """Create or update a sighting, then refresh.

        Returns True when the form session may close; on False the caller
        keeps its working values so nothing the user typed is lost.
        """
        payload = self.build_payload(values)

        if editing_id is not None:
            stage, message = LifecycleStage.UPDATE, UPDATED
            plog.step_start(stage, f"Updating '{payload.name}'", id=editing_id)
            result = await self._call(self._store.update(editing_id, payload))
        else:
            stage, message = LifecycleStage.CREATE, CREATED
            plog.step_start(stage, f"Adding '{payload.name}'", species=payload.species)
            result = await self._call(self._store.create(payload))

        if not result.success:
            plog.step_error(stage, f"Could not save '{payload.name}'", result.error)
            self._notifier.failure(FailureKind.SAVE, SAVE_FAILED, result.error)
            return False

        plog.step_complete(stage, f"Saved '{payload.name}'")
        self._notifier.success(message)
        await self.refresh()
        return True

    async def toggle_favorite(self, sighting: Sighting) -> bool:
        """Flip the favorite flag through the store; no optimistic update."""
        toggled = sighting.with_favorite(not sighting.is_favorite)
        plog.step_start(
            LifecycleStage.FAVORITE,
            f"Marking '{sighting.name}' as {'favorite' if toggled.is_favorite else 'not favorite'}",
            id=sighting.id,
        )
        result = await self._call(self._store.update(sighting.id, payload_from_sighting(toggled)))

        if not result.success:
            plog.step_error(LifecycleStage.FAVORITE, f"Toggle failed for '{sighting.name}'", result.error)
            self._notifier.failure(FailureKind.TOGGLE, TOGGLE_FAILED, result.error)
            return False

        plog.step_complete(LifecycleStage.FAVORITE, "Favorite updated", favorite=toggled.is_favorite)
        await self.refresh()
        self._notifier.success(FAVORITED if toggled.is_favorite else UNFAVORITED)
        return True

    # ── Local-only actions ──────────────────────────────────────────

    def remove(self, sighting_id: str) -> None:
        """Drop a sighting from the displayed list.

        Known limitation: the store has no delete, so the sighting is still
        stored and comes back on the next refresh().
        """
        before = len(self._sightings)
        self._sightings = [s for s in self._sightings if s.id != sighting_id]
        plog.step_complete(
            LifecycleStage.REMOVE,
            "Removed from the local list only",
            id=sighting_id,
            removed=before - len(self._sightings),
        )
        self._notifier.success(REMOVED)

    # ── Derived statistics (recomputed on every access) ─────────────

    def stats(self) -> SightingStats:
        return SightingStats.from_sightings(self._sightings)

    @property
    def total_count(self) -> int:
        return self.stats().total_count

    @property
    def unique_species_count(self) -> int:
        return self.stats().unique_species_count

    @property
    def favorite_count(self) -> int:
        return self.stats().favorite_count

    # ── Table paging ────────────────────────────────────────────────

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(len(self._sightings) / self._page_size))

    def page(self, number: int) -> list[Sighting]:
        """Sightings shown on 1-based table page ``number``."""
        if number < 1:
            raise ValueError(f"Page numbers start at 1, got {number}")
        start = (number - 1) * self._page_size
        return self._sightings[start : start + self._page_size]

    async def _call(self, pending: Awaitable[StoreResult]) -> StoreResult:
        """Await a store call, folding RecordStoreError into a failed result."""
        try:
            return await pending
        except RecordStoreError as exc:
            return StoreResult.failed(str(exc))
