from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from limelink_mcp.domain.exceptions import ApiError
from limelink_mcp.infrastructure.config import API_BASE_URL

logger = logging.getLogger(__name__)


class LimelinkClient:
    """HTTP client for the Limelink REST API, authenticated with an X-API-KEY header.

    Link data is never cached: lookups always reflect the current server state.
    """

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient,
        base_url: str = API_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._http = http_client  # Shared with DocFetcher
        self._base_url = base_url.rstrip("/")

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-API-KEY": self._api_key,
            "Content-Type": "application/json",
        }

    async def create_link(self, body: dict[str, Any]) -> Any:
        """POST /core/link."""
        return await self._request("POST", "/core/link", json_body=body)

    async def get_link_by_suffix(self, project_id: str, suffix: str) -> Any:
        """GET /dynamic-link/{project_id}?dynamic_link_suffix=...&call_type=API."""
        params = {"dynamic_link_suffix": suffix, "call_type": "API"}
        return await self._request("GET", f"/dynamic-link/{project_id}", params=params)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        response = await self._http.request(
            method, url, params=params, json=json_body, headers=self.headers
        )
        self._raise_for_status(response)
        try:
            return response.json()
        except ValueError:
            raise ApiError(
                response.status_code,
                f"Invalid JSON response (HTTP {response.status_code}) from {method} {path}",
            )

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise ApiError for non-2xx responses, preferring the server's own message."""
        if response.is_success:
            return
        logger.warning("Limelink API returned HTTP %s for %s", response.status_code, response.url)
        try:
            error_body = response.json()
        except ValueError:
            message = f"HTTP {response.status_code}: {response.reason_phrase}"
        else:
            message = (
                error_body.get("message") if isinstance(error_body, dict) else None
            ) or json.dumps(error_body, ensure_ascii=False)
        raise ApiError(response.status_code, message)
