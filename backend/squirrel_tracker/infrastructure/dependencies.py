"""Dependency wiring — connects infrastructure adapters to the application layer."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from squirrel_tracker.config import get_settings
from squirrel_tracker.application.services import (
    DetailViewer,
    FormSession,
    Notifier,
    SightingController,
    SightingService,
)
from squirrel_tracker.infrastructure.database.session import get_db_session
from squirrel_tracker.infrastructure.database.repositories import SQLAlchemySightingRepository
from squirrel_tracker.infrastructure.store import HttpRecordStore


async def get_sighting_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SightingService, None]:
    """Provides a SightingService instance with its repository wired up."""
    repository = SQLAlchemySightingRepository(session)
    yield SightingService(repository)


class SightingWorkspace:
    """Client-side state bundle: one controller, one form session, one detail viewer."""

    def __init__(self, controller: SightingController):
        self.controller = controller
        self.form = FormSession(controller)
        self.viewer = DetailViewer()

    @property
    def notifier(self) -> Notifier:
        return self.controller.notifier


def build_workspace(
    http_client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
) -> SightingWorkspace:
    """Build the client-side state wired to the HTTP record store.

    ``base_url`` defaults to the configured ``store_base_url``.
    """
    settings = get_settings()
    store = HttpRecordStore(
        base_url=base_url or settings.store_base_url,
        timeout=settings.store_timeout,
        http_client=http_client,
    )
    controller = SightingController(store, Notifier(), page_size=settings.page_size)
    return SightingWorkspace(controller)
