"""
SerpApi client for scholarly and site-scoped web search.

Two methods:
  1. search_scholar - Google Scholar organic results, passed through as-is
  2. search_site    - Google organic results restricted to one site
"""

from __future__ import annotations

from typing import Any

from curalink.constants import RESEARCHGATE_SITE, SERPAPI_SEARCH_URL
from curalink.data_sources.base_client import BaseClient, ClientConfig, RequestContext
from curalink.exceptions import ConfigurationError
from curalink.models.model_serpapi import SiteSearchResult


class SerpApiClient(BaseClient):
    """Client for the SerpApi search aggregator."""

    def __init__(self, api_key: str, config: ClientConfig | None = None) -> None:
        super().__init__(config)
        self._api_key = api_key

    @property
    def _source_name(self) -> str:
        return "serpapi"

    # -- Public methods -------------------------------------------------------

    async def search_scholar(self, topic: str) -> list[dict[str, Any]]:
        data = await self._search(
            {"engine": "google_scholar", "q": topic}, method="search_scholar"
        )
        with self._parsing("search_scholar"):
            results = data.get("organic_results") or []
            if not isinstance(results, list):
                raise TypeError(f"organic_results is {type(results).__name__}")
            return results

    async def search_site(
        self, topic: str, site: str = RESEARCHGATE_SITE
    ) -> list[SiteSearchResult]:
        data = await self._search(
            {"engine": "google", "q": f"{topic} site:{site}"}, method="search_site"
        )
        with self._parsing("search_site"):
            return [
                SiteSearchResult(
                    title=r.get("title"), link=r.get("link"), snippet=r.get("snippet")
                )
                for r in data.get("organic_results") or []
            ]

    # -- Helpers --------------------------------------------------------------

    async def _search(self, params: dict[str, Any], method: str) -> dict[str, Any]:
        if not self._api_key:
            raise ConfigurationError("Search API key not set")
        return await self._rest_get(
            SERPAPI_SEARCH_URL,
            {**params, "api_key": self._api_key},
            # the api key rides in the query string, so log the call without params
            context=RequestContext(source=self._source_name, method=method),
        )
