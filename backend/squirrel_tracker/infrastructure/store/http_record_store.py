"""HTTP record store — implements the RecordStore port against the sightings API.

Talks to ``/sightings`` on the squirrel tracker service using httpx and
unwraps the ``{success, data}`` envelope it returns.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from squirrel_tracker.application.interfaces.record_store import RecordStore, StoreResult
from squirrel_tracker.application.schemas import (
    SightingEnvelope,
    SightingListEnvelope,
    SightingPayload,
    SightingResponse,
)
from squirrel_tracker.domain.entities import Sighting
from squirrel_tracker.domain.exceptions import RecordStoreError

logger = logging.getLogger(__name__)


class HttpRecordStore(RecordStore):
    """Infrastructure adapter — connects to the sightings HTTP API.

    Network errors, unusable URLs and non-2xx answers come back as failed
    results.
    A 2xx answer whose body is not a valid envelope raises RecordStoreError.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8020/api/v1",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def store_name(self) -> str:
        return "http"

    async def list(self) -> StoreResult[Sequence[Sighting]]:
        result = await self._request("GET", "/sightings", SightingListEnvelope)
        if not result.success:
            return StoreResult.failed(result.error or "list failed")
        return StoreResult.ok([self._to_entity(item) for item in result.data.data])

    async def create(self, data: SightingPayload) -> StoreResult[Sighting]:
        result = await self._request("POST", "/sightings", SightingEnvelope, json=self._serialize(data))
        return self._single(result)

    async def update(self, record_id: str, data: SightingPayload) -> StoreResult[Sighting]:
        result = await self._request(
            "PUT", f"/sightings/{record_id}", SightingEnvelope, json=self._serialize(data)
        )
        return self._single(result)

    @staticmethod
    def _serialize(data: SightingPayload) -> dict[str, Any]:
        return data.model_dump(mode="json", by_alias=True)

    @staticmethod
    def _to_entity(item: SightingResponse) -> Sighting:
        return Sighting(**item.model_dump())

    def _single(self, result: StoreResult) -> StoreResult[Sighting]:
        if not result.success:
            return StoreResult.failed(result.error or "request failed")
        if result.data.data is None:
            raise RecordStoreError(self.store_name, "Envelope reported success without data")
        return StoreResult.ok(self._to_entity(result.data.data))

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        envelope: type[BaseModel],
        *,
        json: dict[str, Any] | None = None,
    ) -> StoreResult:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, url, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return StoreResult.failed(f"{type(exc).__name__}: {exc}")
        finally:
            if should_close:
                await client.aclose()

        if response.status_code >= 400:
            detail = self._error_detail(response)
            logger.warning("%s %s returned %d: %s", method, url, response.status_code, detail)
            return StoreResult.failed(f"{response.status_code}: {detail}")

        try:
            parsed = envelope.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise RecordStoreError(self.store_name, f"Malformed response from {url}: {exc}") from exc

        if not parsed.success:
            return StoreResult.failed(parsed.error or "store reported failure")
        return StoreResult.ok(parsed)

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract a human-readable error message from an error response."""
        try:
            body = response.json()
        except ValueError:
            return response.text[:200] or "no response body"
        if isinstance(body, dict):
            return str(body.get("error") or body.get("detail") or body)
        return str(body)
