"""Unit tests for the HttpRecordStore."""

import json
from datetime import date

import httpx
import pytest

from squirrel_tracker.application.schemas import SightingForm, SightingPayload
from squirrel_tracker.application.services import SightingController
from squirrel_tracker.domain.entities import FailureKind
from squirrel_tracker.domain.exceptions import RecordStoreError
from squirrel_tracker.infrastructure.store import HttpRecordStore


# ── Helpers ──


def _sighting_json(**overrides) -> dict:
    body = {
        "id": "3f1c",
        "name": "Nutkin",
        "species": "Gray Squirrel",
        "location": "Central Park",
        "size": None,
        "color": "Gray",
        "behavior": "Eating",
        "dateSpotted": "2026-10-18",
        "notes": None,
        "isFavorite": False,
        "createdAt": "2026-10-18T09:00:00Z",
        "updatedAt": "2026-10-18T09:00:00Z",
    }
    body.update(overrides)
    return body


def _store(handler) -> HttpRecordStore:
    return HttpRecordStore(
        base_url="http://store.test/api/v1/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_list_unwraps_envelope():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert str(request.url) == "http://store.test/api/v1/sightings"
        return httpx.Response(200, json={"success": True, "data": [_sighting_json()]})

    result = await _store(handler).list()

    assert result.success is True
    assert len(result.data) == 1
    sighting = result.data[0]
    assert sighting.id == "3f1c"
    assert sighting.date_spotted == date(2026, 10, 18)
    assert sighting.is_favorite is False


@pytest.mark.asyncio
async def test_create_posts_camel_case_payload():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"success": True, "data": _sighting_json(name="Chippy")})

    payload = SightingPayload(
        name="Chippy",
        species="Red Squirrel",
        location="Oak Tree",
        date_spotted=date(2026, 10, 18),
    )
    result = await _store(handler).create(payload)

    assert result.success is True
    assert result.data.name == "Chippy"
    assert seen["body"]["dateSpotted"] == "2026-10-18"
    assert seen["body"]["isFavorite"] is False


@pytest.mark.asyncio
async def test_update_targets_record_url():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PUT"
        assert request.url.path == "/api/v1/sightings/3f1c"
        return httpx.Response(200, json={"success": True, "data": _sighting_json(isFavorite=True)})

    payload = SightingPayload(name="Nutkin", species="Gray Squirrel", location="Park", is_favorite=True)
    result = await _store(handler).update("3f1c", payload)

    assert result.success is True
    assert result.data.is_favorite is True


@pytest.mark.asyncio
async def test_error_status_becomes_failed_result():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Sighting with id 'nope' not found"})

    payload = SightingPayload(name="X", species="Other", location="Y")
    result = await _store(handler).update("nope", payload)

    assert result.success is False
    assert "404" in result.error
    assert "not found" in result.error


@pytest.mark.asyncio
async def test_envelope_failure_becomes_failed_result():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "error": "store offline"})

    result = await _store(handler).list()

    assert result.success is False
    assert result.error == "store offline"


@pytest.mark.asyncio
async def test_transport_error_becomes_failed_result():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _store(handler).list()

    assert result.success is False
    assert "ConnectError" in result.error


@pytest.mark.asyncio
async def test_unusable_base_url_becomes_failed_result():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request should be sent")

    store = HttpRecordStore(
        base_url="http://store.test:notaport/api/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    result = await store.list()

    assert result.success is False
    assert "InvalidURL" in result.error


@pytest.mark.asyncio
async def test_invalid_url_during_save_is_a_save_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("bad target")

    controller = SightingController(_store(handler))
    form = SightingForm(name="Chippy", species="Red Squirrel", location="Oak Tree")

    assert await controller.submit(form) is False

    assert controller.notifier.latest.failure is FailureKind.SAVE
    assert "bad target" in controller.notifier.latest.detail


@pytest.mark.asyncio
async def test_malformed_body_raises_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(RecordStoreError):
        await _store(handler).list()
