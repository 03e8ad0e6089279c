"""Europe PMC literature search client."""

from __future__ import annotations

from typing import Any

from curalink.constants import (
    EUROPE_PMC_ARTICLE_URL,
    EUROPE_PMC_DEFAULT_TOPIC,
    EUROPE_PMC_PAGE_SIZE,
    EUROPE_PMC_SEARCH_URL,
)
from curalink.data_sources.base_client import BaseClient, RequestContext
from curalink.models.model_research import ResearchPaper


class EuropePMCClient(BaseClient):
    @property
    def _source_name(self) -> str:
        return "europe_pmc"

    async def search_papers(self, topic: str | None = None) -> list[ResearchPaper]:
        params = {
            "query": topic or EUROPE_PMC_DEFAULT_TOPIC,
            "format": "json",
            "pageSize": EUROPE_PMC_PAGE_SIZE,
        }
        data = await self._rest_get(
            EUROPE_PMC_SEARCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="search_papers"),
        )
        with self._parsing("search_papers"):
            hits = (data.get("resultList") or {}).get("result") or []
            return [self._parse_hit(h) for h in hits]

    @staticmethod
    def _parse_hit(hit: dict[str, Any]) -> ResearchPaper:
        full_text_urls = (hit.get("fullTextUrlList") or {}).get("fullTextUrl") or []
        link = (full_text_urls[0] or {}).get("url") if full_text_urls else None
        return ResearchPaper(
            title=hit.get("title"),
            authors=hit.get("authorString") or "Unknown authors",
            link=link
            or EUROPE_PMC_ARTICLE_URL.format(source=hit.get("source"), id=hit.get("id")),
        )
