"""
PubMed API client.

Two calls per search:
  1. search          - esearch: query → PMIDs
  2. fetch_summaries - esummary: PMIDs → article summaries
"""

from __future__ import annotations

from typing import Any

from curalink.constants import (
    PUBMED_ARTICLE_URL,
    PUBMED_MAX_RESULTS,
    PUBMED_SEARCH_URL,
    PUBMED_SUMMARY_URL,
)
from curalink.data_sources.base_client import BaseClient, RequestContext
from curalink.models.model_pubmed import Paper


class PubMedClient(BaseClient):
    """Client for querying PubMed/NCBI E-utilities."""

    @property
    def _source_name(self) -> str:
        return "pubmed"

    async def search_papers(
        self, query: str, max_results: int = PUBMED_MAX_RESULTS
    ) -> list[Paper]:
        """Search PubMed and return summaries for the top hits.

        An empty id list short-circuits without calling esummary.
        """
        pmids = await self.search(query, max_results=max_results)
        if not pmids:
            return []
        return await self.fetch_summaries(pmids)

    async def search(self, query: str, max_results: int = PUBMED_MAX_RESULTS) -> list[str]:
        """Search PubMed and return list of PMIDs."""
        params: dict[str, Any] = {
            "db": "pubmed",
            "term": query,
            "retmode": "json",
            "retmax": max_results,
        }
        data = await self._rest_get(
            PUBMED_SEARCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="search"),
        )
        with self._parsing("search"):
            return (data.get("esearchresult") or {}).get("idlist") or []

    async def fetch_summaries(self, pmids: list[str]) -> list[Paper]:
        """Fetch esummary records for *pmids*, preserving NCBI's uid order."""
        if not pmids:
            return []

        params = {"db": "pubmed", "id": ",".join(str(p) for p in pmids), "retmode": "json"}
        data = await self._rest_get(
            PUBMED_SUMMARY_URL,
            params,
            context=RequestContext(source=self._source_name, method="fetch_summaries"),
        )
        with self._parsing("fetch_summaries"):
            result: dict[str, Any] = data.get("result") or {}
            uids = result.get("uids") or [k for k in result if k != "uids"]
            return [self._parse_summary(result[uid]) for uid in uids if uid in result]

    @staticmethod
    def _parse_summary(summary: dict[str, Any]) -> Paper:
        uid = str(summary.get("uid", ""))
        authors = [a.get("name", "") for a in summary.get("authors") or []]
        return Paper(
            id=uid,
            title=summary.get("title") or "",
            journal=summary.get("fulljournalname") or summary.get("source") or "",
            pub_date=summary.get("pubdate") or "",
            authors=", ".join(a for a in authors if a),
            link=PUBMED_ARTICLE_URL.format(pmid=uid),
        )
