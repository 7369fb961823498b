from __future__ import annotations

import json
import logging
from typing import Annotated, Any
from urllib.parse import urlsplit

import httpx
from mcp import types
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from limelink_mcp.application.link_service import LinkService
from limelink_mcp.domain.entities import AdditionalOptions, PlatformOptions
from limelink_mcp.domain.exceptions import ApiError, ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

_RESULT_URI = "mcp://limelink/result"

ProjectId = Annotated[
    str | None,
    Field(description="Project ID. Uses LIMELINK_PROJECT_ID env if not provided."),
]


def _as_resource(json_str: str) -> list[types.EmbeddedResource]:
    """Wrap a JSON string as an embedded resource so the LLM does not narrate it."""
    return [
        types.EmbeddedResource(
            type="resource",
            resource=types.TextResourceContents(
                uri=_RESULT_URI,  # type: ignore[arg-type]
                mimeType="application/json",
                text=json_str,
            ),
        )
    ]


def _error_json(message: str) -> str:
    return json.dumps({"error": message}, ensure_ascii=False)


def _result_json(result: Any) -> str:
    return json.dumps(result, indent=2, default=str, ensure_ascii=False)


def _handle_exception(exc: Exception, action: str) -> list[types.EmbeddedResource]:
    if isinstance(exc, (ConfigurationError, ValidationError)):
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, ApiError):
        return _as_resource(_error_json(f"Error {action}: {exc}"))
    if isinstance(exc, httpx.TimeoutException):
        return _as_resource(_error_json(f"Error {action}: request timed out. Please try again."))
    if isinstance(exc, httpx.HTTPError):
        return _as_resource(_error_json(f"Error {action}: {exc}"))
    if isinstance(exc, ValueError):
        return _as_resource(_error_json(str(exc)))
    logger.exception("Unexpected error in MCP tool: %s", exc)
    return _as_resource(_error_json("An unexpected error occurred."))


def _validate_url(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Invalid URL: {url!r}. Expected an absolute http(s) URL.")
    return url


def register_tools(mcp: FastMCP, link_svc: LinkService) -> None:
    """Bind all @mcp.tool decorators. Called once during server setup."""

    @mcp.tool(
        name="create-link",
        description=(
            "Create a Limelink dynamic link with platform-specific deep linking, "
            "social previews, and UTM tracking"
        ),
    )
    async def create_link(
        dynamic_link_suffix: Annotated[
            str, Field(max_length=50, description="Unique identifier for the short URL path")
        ],
        dynamic_link_url: Annotated[
            str, Field(max_length=500, description="Target URL for desktop or fallback")
        ],
        dynamic_link_name: Annotated[
            str, Field(max_length=100, description="Link name for management and identification")
        ],
        project_id: ProjectId = None,
        stats_flag: Annotated[
            bool | None, Field(description="Enable analytics tracking")
        ] = None,
        apple_options: Annotated[
            PlatformOptions | None, Field(description="iOS-specific deep linking options")
        ] = None,
        android_options: Annotated[
            PlatformOptions | None, Field(description="Android-specific deep linking options")
        ] = None,
        additional_options: Annotated[
            AdditionalOptions | None, Field(description="Social preview and UTM tracking options")
        ] = None,
    ) -> list[types.EmbeddedResource]:
        try:
            result = await link_svc.create_link(
                dynamic_link_suffix=dynamic_link_suffix,
                dynamic_link_url=_validate_url(dynamic_link_url),
                dynamic_link_name=dynamic_link_name,
                project_id=project_id,
                stats_flag=stats_flag,
                apple_options=apple_options,
                android_options=android_options,
                additional_options=additional_options,
            )
            return _as_resource(_result_json(result))
        except Exception as exc:
            return _handle_exception(exc, "creating link")

    @mcp.tool(
        name="get-link-by-suffix",
        description="Look up a Limelink dynamic link by its suffix",
    )
    async def get_link_by_suffix(
        suffix: Annotated[str, Field(description="Dynamic link suffix to look up")],
        project_id: ProjectId = None,
    ) -> list[types.EmbeddedResource]:
        try:
            result = await link_svc.get_link_by_suffix(suffix, project_id)
            return _as_resource(_result_json(result))
        except Exception as exc:
            return _handle_exception(exc, "fetching link")

    @mcp.tool(
        name="get-link-by-url",
        description=(
            "Look up a Limelink dynamic link by its full URL. Supports both Free "
            "(deep.limelink.org) and Pro ({project}.limelink.org/link/) URL formats."
        ),
    )
    async def get_link_by_url(
        url: Annotated[str, Field(description="Full Limelink dynamic link URL to look up")],
        project_id: ProjectId = None,
    ) -> list[types.EmbeddedResource]:
        try:
            result = await link_svc.get_link_by_url(url, project_id)
            return _as_resource(_result_json(result))
        except Exception as exc:
            return _handle_exception(exc, "fetching link")
