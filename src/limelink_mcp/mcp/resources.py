from __future__ import annotations

from collections.abc import Awaitable, Callable

from mcp.server.fastmcp import FastMCP

from limelink_mcp.domain.value_objects import VALID_SLUGS
from limelink_mcp.infrastructure.doc_fetcher import DocFetcher

INDEX_URI = "limelink://docs/index"
DOC_URI_TEMPLATE = "limelink://docs/{slug}"


def _doc_reader(doc_fetcher: DocFetcher, slug: str) -> Callable[[], Awaitable[str]]:
    async def read_doc() -> str:
        return await doc_fetcher.fetch_doc(slug)

    return read_doc


def register_resources(mcp: FastMCP, doc_fetcher: DocFetcher) -> None:
    """Register the documentation index, one resource per known page, and the page template."""

    @mcp.resource(
        INDEX_URI,
        name="docs-index",
        description="Limelink documentation index (llms.txt). Lists all available documentation pages",
        mime_type="text/plain",
    )
    async def docs_index() -> str:
        return await doc_fetcher.fetch_index()

    # Concrete resources make every page show up in resources/list
    for slug in VALID_SLUGS:
        mcp.resource(
            DOC_URI_TEMPLATE.format(slug=slug),
            name=f"Limelink Docs: {slug}",
            description=f"Documentation page for {slug}",
            mime_type="text/markdown",
        )(_doc_reader(doc_fetcher, slug))

    @mcp.resource(
        DOC_URI_TEMPLATE,
        name="docs-page",
        description="Individual Limelink documentation page by slug",
        mime_type="text/markdown",
    )
    async def docs_page(slug: str) -> str:
        """Unknown slugs raise InvalidDocSlugError listing the valid ones."""
        return await doc_fetcher.fetch_doc(slug)
