"""Voyager HTTP transport built on httpx."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from ..errors import TransportError
from ..schemas import TransportConfig

NORMALIZED_JSON = "application/vnd.linkedin.normalized+json+2.1"


class VoyagerHTTPTransport:
    """Fetch profile responses from the Voyager API.

    Session cookies and headers (``csrf-token``, ``li_at`` and friends) are
    supplied by the caller through :class:`TransportConfig`; this class never
    logs in and never retries.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._client = client
        self._logger = structlog.get_logger(__name__)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                headers=self._headers(),
                cookies=self._config.cookies,
            )
        return self._client

    def _headers(self) -> dict[str, str]:
        headers = {
            "accept": NORMALIZED_JSON,
            "x-restli-protocol-version": "2.0.0",
        }
        headers.update(self._config.headers)
        return headers

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "VoyagerHTTPTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def get_profile(self, public_identifier: str) -> dict[str, Any]:
        return await self._get(
            "/identity/dash/profiles",
            params={
                "q": "memberIdentity",
                "memberIdentity": public_identifier,
                "decorationId": self._config.profile_decoration_id,
            },
        )

    async def get_own_profile(self) -> dict[str, Any]:
        return await self._get("/me")

    async def _get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        client = self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as exc:
            self._logger.warning("transport.request_failed", path=path, error=str(exc))
            raise TransportError(f"Request to {path} failed: {exc}") from exc

        if response.status_code != 200:
            self._logger.warning(
                "transport.unexpected_status",
                path=path,
                status=response.status_code,
            )
            raise TransportError(
                "Unexpected response status",
                url=str(response.request.url),
                status=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                "Response body is not JSON", url=str(response.request.url)
            ) from exc
