from __future__ import annotations

from typing import Any

from limelink_mcp.domain.entities import (
    AdditionalOptions,
    CreateLinkRequest,
    PlatformOptions,
)
from limelink_mcp.domain.exceptions import ConfigurationError, ValidationError
from limelink_mcp.domain.services import extract_suffix
from limelink_mcp.infrastructure.limelink_client import LimelinkClient

API_KEY_REQUIRED = (
    "LIMELINK_API_KEY is not configured. "
    "Set the LIMELINK_API_KEY environment variable to use this tool."
)
PROJECT_ID_REQUIRED = (
    "project_id is required. "
    "Provide it as a parameter or set LIMELINK_PROJECT_ID environment variable."
)


class LinkService:
    """Orchestrates project resolution, request assembly and suffix lookup for the link tools."""

    def __init__(self, client: LimelinkClient | None, default_project_id: str | None = None) -> None:
        self._client = client  # None when no API key is configured
        self._default_project_id = default_project_id

    async def create_link(
        self,
        dynamic_link_suffix: str,
        dynamic_link_url: str,
        dynamic_link_name: str,
        project_id: str | None = None,
        stats_flag: bool | None = None,
        apple_options: PlatformOptions | None = None,
        android_options: PlatformOptions | None = None,
        additional_options: AdditionalOptions | None = None,
    ) -> Any:
        """Create a dynamic link. Unset optional fields are omitted from the payload."""
        client = self._require_client()
        request = CreateLinkRequest(
            dynamic_link_suffix=dynamic_link_suffix,
            dynamic_link_url=dynamic_link_url,
            dynamic_link_name=dynamic_link_name,
            project_id=self.resolve_project_id(project_id),
            stats_flag=stats_flag,
            apple_options=apple_options,
            android_options=android_options,
            additional_options=additional_options,
        )
        return await client.create_link(request.to_payload())

    async def get_link_by_suffix(self, suffix: str, project_id: str | None = None) -> Any:
        client = self._require_client()
        if not suffix.strip():
            raise ValidationError("suffix cannot be empty")
        return await client.get_link_by_suffix(self.resolve_project_id(project_id), suffix)

    async def get_link_by_url(self, url: str, project_id: str | None = None) -> Any:
        """Extract the suffix from a full link URL, then look it up.

        Check order: API key, suffix extraction, project id.
        """
        client = self._require_client()
        suffix = extract_suffix(url)
        if suffix is None:
            raise ValidationError(
                f'Could not extract suffix from URL "{url}". Expected formats:\n'
                "- https://deep.limelink.org/{suffix}\n"
                "- https://{project}.limelink.org/link/{suffix}"
            )
        return await client.get_link_by_suffix(self.resolve_project_id(project_id), suffix)

    def resolve_project_id(self, project_id: str | None) -> str:
        """Return the explicit project id, else the configured default."""
        resolved = project_id or self._default_project_id
        if not resolved:
            raise ConfigurationError(PROJECT_ID_REQUIRED)
        return resolved

    def _require_client(self) -> LimelinkClient:
        if self._client is None:
            raise ConfigurationError(API_KEY_REQUIRED)
        return self._client
