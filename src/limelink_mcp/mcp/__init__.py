from __future__ import annotations

import httpx
from mcp.server.fastmcp import FastMCP

from limelink_mcp.application.link_service import LinkService
from limelink_mcp.infrastructure.cache import DEFAULT_TTL, TTLCache
from limelink_mcp.infrastructure.config import Config
from limelink_mcp.infrastructure.doc_fetcher import DocFetcher
from limelink_mcp.infrastructure.limelink_client import LimelinkClient
from limelink_mcp.mcp.prompts import register_prompts
from limelink_mcp.mcp.resources import register_resources
from limelink_mcp.mcp.tools import register_tools

DEFAULT_TIMEOUT = 15.0  # seconds


def create_mcp_app(config: Config | None = None) -> FastMCP:
    """Create and configure the FastMCP application with all services wired."""
    config = config if config is not None else Config.from_env()

    cache: TTLCache[str] = TTLCache(default_ttl=DEFAULT_TTL)
    http_client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, follow_redirects=True)
    doc_fetcher = DocFetcher(cache=cache, http_client=http_client)
    limelink_client = (
        LimelinkClient(api_key=config.api_key, http_client=http_client)
        if config.api_key
        else None
    )
    link_svc = LinkService(limelink_client, default_project_id=config.project_id)

    mcp = FastMCP("limelink", stateless_http=True)
    register_tools(mcp, link_svc)
    register_resources(mcp, doc_fetcher)
    register_prompts(mcp)
    return mcp
