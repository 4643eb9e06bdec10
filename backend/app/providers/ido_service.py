"""Client helpers for the Infor CSI IDORequestService."""

from __future__ import annotations

import logging
from typing import Any, Sequence
from urllib.parse import quote

import httpx
from opentelemetry import trace
from opentelemetry.propagate import inject
from opentelemetry.trace import SpanKind

from app.config import IDOConnection

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class IDOServiceError(RuntimeError):
    """Raised when a collection cannot be loaded from the IDO service."""


class UpstreamRequestError(IDOServiceError):
    """Raised on transport failures, error statuses or rejected credentials."""


class UpstreamShapeError(IDOServiceError):
    """Raised when the IDO response does not carry an ``Items`` list."""


class IDOClient:
    """Loads IDO collections with the shared Mongoose credential."""

    def __init__(self, connection: IDOConnection, *, client: Any | None = None) -> None:
        self._connection = connection
        self._client = client

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": self._connection.token,
            "Accept": "application/json",
            "X-Infor-MongooseConfig": self._connection.config_name,
        }
        # Inject current trace context so the IDO load span reaches the upstream call
        try:
            inject(headers)
        except Exception:
            # Best-effort; tracing injection is optional
            pass
        return headers

    def _params(self, properties: Sequence[str], filter: str | None) -> dict[str, Any]:
        params: dict[str, Any] = {}
        props = ",".join(properties)
        if props:
            params["properties"] = props
        if filter:
            params["filter"] = filter
        params["recordcap"] = self._connection.record_cap
        return params

    async def _get(self, url: str, params: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, params=params, headers=headers)
        options: dict[str, Any] = {}
        if self._connection.timeout_seconds is not None:
            options["timeout"] = self._connection.timeout_seconds
        async with httpx.AsyncClient(**options) as client:
            return await client.get(url, params=params, headers=headers)

    async def load_collection(
        self,
        ido_name: str,
        properties: Sequence[str] = (),
        filter: str | None = None,
    ) -> list[dict[str, Any]]:
        """Return the raw ``Items`` of an IDO collection in upstream order."""

        url = f"{self._connection.base_url.rstrip('/')}/load/{quote(ido_name, safe='')}"
        params = self._params(properties, filter)
        with tracer.start_as_current_span(f"IDO load {ido_name}", kind=SpanKind.CLIENT) as span:
            span.set_attribute("ido.collection", ido_name)
            span.set_attribute("ido.record_cap", self._connection.record_cap)
            items = await self._load(ido_name, url, params)
            span.set_attribute("ido.item_count", len(items))
        return items

    async def _load(self, ido_name: str, url: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        try:
            response = await self._get(url, params, self._headers())
        except httpx.HTTPError as exc:
            raise UpstreamRequestError(f"Failed to reach IDO service: {exc}") from exc

        if not response.is_success:
            logger.warning("IDO service error %s for %s", response.status_code, url)
            raise UpstreamRequestError(f"IDO service error {response.status_code} loading {ido_name}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamShapeError(f"IDO service returned invalid JSON for {ido_name}") from exc

        if not isinstance(payload, dict):
            raise UpstreamShapeError(f"IDO service response for {ido_name} is not an object")

        if payload.get("Success") is False:
            message = payload.get("Message") or "request rejected"
            raise UpstreamRequestError(f"IDO service rejected load of {ido_name}: {message}")

        items = payload.get("Items")
        if not isinstance(items, list):
            raise UpstreamShapeError(f"IDO response for {ido_name} has no Items list")

        logger.info("Loaded %d records from %s", len(items), ido_name)
        return items


__all__ = [
    "IDOClient",
    "IDOServiceError",
    "UpstreamRequestError",
    "UpstreamShapeError",
]
