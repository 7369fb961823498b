from __future__ import annotations

import logging

import httpx

from limelink_mcp.domain.exceptions import DocumentFetchError, InvalidDocSlugError
from limelink_mcp.domain.services import is_valid_slug
from limelink_mcp.domain.value_objects import VALID_SLUGS
from limelink_mcp.infrastructure.cache import TTLCache
from limelink_mcp.infrastructure.config import DOCS_BASE_URL

logger = logging.getLogger(__name__)

INDEX_CACHE_KEY = "llms.txt"
DOC_CACHE_PREFIX = "doc:"


class DocFetcher:
    """Fetches the Limelink documentation corpus (llms.txt and per-page markdown).

    Every successful fetch is memoized in the shared TTLCache using the cache's
    default TTL. Failed fetches are never cached.
    """

    def __init__(
        self,
        cache: TTLCache[str],
        http_client: httpx.AsyncClient,
        base_url: str = DOCS_BASE_URL,
    ) -> None:
        self._cache = cache
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    async def fetch_index(self) -> str:
        """GET /llms.txt: the documentation index."""
        return await self._fetch(INDEX_CACHE_KEY, f"{self._base_url}/llms.txt", "llms.txt")

    async def fetch_doc(self, slug: str) -> str:
        """GET /md/{slug}.md. Raises InvalidDocSlugError before any network access."""
        if not is_valid_slug(slug):
            raise InvalidDocSlugError(slug, VALID_SLUGS)
        return await self._fetch(
            f"{DOC_CACHE_PREFIX}{slug}",
            f"{self._base_url}/md/{slug}.md",
            f"document '{slug}'",
        )

    async def _fetch(self, cache_key: str, url: str, resource: str) -> str:
        """Internal GET helper.

        1. Return the cached text if the key is live.
        2. Otherwise perform exactly one GET.
        3. Raise DocumentFetchError on non-2xx status, leaving the cache untouched.
        4. Store the raw body text in the cache and return it.
        """
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s", cache_key)
            return cached

        logger.debug("Cache miss for %s, fetching %s", cache_key, url)
        response = await self._http.get(url)
        if not response.is_success:
            logger.warning("Fetching %s failed with HTTP %s", url, response.status_code)
            raise DocumentFetchError(resource, response.status_code, response.reason_phrase)

        text = response.text
        self._cache.set(cache_key, text)
        return text
