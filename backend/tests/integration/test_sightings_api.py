"""Integration tests: sightings API, HTTP record store and client-side state together.

The API runs in-process through ASGITransport on top of an in-memory
SQLite database, so every layer from FormSession down to the ORM is real.
"""

from collections.abc import AsyncIterator
from dataclasses import replace
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from squirrel_tracker.application.services import SightingService
from squirrel_tracker.domain.entities import FailureKind, SightingDraft
from squirrel_tracker.infrastructure.database import Base
from squirrel_tracker.infrastructure.database.repositories import SQLAlchemySightingRepository
from squirrel_tracker.infrastructure.dependencies import build_workspace, get_sighting_service
from squirrel_tracker.main import app


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_service() -> AsyncIterator[SightingService]:
        async with session_factory() as session:
            yield SightingService(SQLAlchemySightingRepository(session))
            await session.commit()

    app.dependency_overrides[get_sighting_service] = override_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.mark.asyncio
async def test_create_and_list_use_envelope(client: AsyncClient):
    response = await client.post(
        "/api/v1/sightings",
        json={"name": "Nutkin", "species": "Gray Squirrel", "location": "Central Park"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["isFavorite"] is False
    assert body["data"]["dateSpotted"] == date.today().isoformat()

    listed = (await client.get("/api/v1/sightings")).json()
    assert listed["success"] is True
    assert [s["name"] for s in listed["data"]] == ["Nutkin"]


@pytest.mark.asyncio
async def test_create_without_required_field_is_rejected(client: AsyncClient):
    response = await client.post(
        "/api/v1/sightings",
        json={"name": "Nutkin", "species": "Gray Squirrel"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_unknown_sighting_returns_404(client: AsyncClient):
    response = await client.put(
        "/api/v1/sightings/does-not-exist",
        json={"name": "X", "species": "Other", "location": "Y"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_there_is_no_delete_route(client: AsyncClient):
    created = await client.post(
        "/api/v1/sightings",
        json={"name": "Nutkin", "species": "Gray Squirrel", "location": "Central Park"},
    )
    sighting_id = created.json()["data"]["id"]

    response = await client.delete(f"/api/v1/sightings/{sighting_id}")

    assert response.status_code == 405


@pytest.mark.asyncio
async def test_full_lifecycle_through_http_store(client: AsyncClient):
    workspace = build_workspace(http_client=client, base_url="http://test/api/v1")
    controller, form, viewer = workspace.controller, workspace.form, workspace.viewer

    await controller.refresh()
    assert controller.total_count == 0

    form.open_for_create()
    assert await form.confirm(
        SightingDraft(name="Chippy", species="Red Squirrel", location="Oak Tree")
    ) is True
    form.open_for_create()
    await form.confirm(
        SightingDraft(name="Nutkin", species="Gray Squirrel", location="Central Park", color="Gray")
    )
    assert controller.total_count == 2
    assert controller.unique_species_count == 2

    chippy = next(s for s in controller.sightings if s.name == "Chippy")
    assert chippy.date_spotted == date.today()

    form.open_for_edit(chippy)
    draft = SightingDraft.from_sighting(chippy)
    draft.behavior = "Burying food"
    assert await form.confirm(draft) is True
    chippy = next(s for s in controller.sightings if s.name == "Chippy")
    assert chippy.behavior == "Burying food"
    assert controller.total_count == 2

    assert await controller.toggle_favorite(chippy) is True
    assert controller.favorite_count == 1
    assert workspace.notifier.latest.message == "Added to favorites!"

    viewer.open(controller.sightings[0])
    assert viewer.is_open

    controller.remove(chippy.id)
    assert controller.total_count == 1
    await controller.refresh()
    assert controller.total_count == 2


@pytest.mark.asyncio
async def test_failed_edit_keeps_form_open(client: AsyncClient):
    workspace = build_workspace(http_client=client, base_url="http://test/api/v1")
    form = workspace.form

    form.open_for_create()
    await form.confirm(SightingDraft(name="Chippy", species="Red Squirrel", location="Oak Tree"))
    chippy = replace(workspace.controller.sightings[0], id="vanished")

    form.open_for_edit(chippy)
    draft = SightingDraft.from_sighting(chippy)
    assert await form.confirm(draft) is False

    assert form.is_open
    assert form.values is draft
    assert workspace.notifier.latest.failure is FailureKind.SAVE
