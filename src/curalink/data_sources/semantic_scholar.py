"""Semantic Scholar author search client, used to suggest collaborators."""

from __future__ import annotations

from typing import Any

from curalink.constants import (
    SEMANTIC_SCHOLAR_AUTHOR_SEARCH_URL,
    SEMANTIC_SCHOLAR_DEFAULT_QUERY,
    SEMANTIC_SCHOLAR_LIMIT,
)
from curalink.data_sources.base_client import BaseClient, RequestContext
from curalink.models.model_research import Collaborator


class SemanticScholarClient(BaseClient):
    @property
    def _source_name(self) -> str:
        return "semantic_scholar"

    async def search_authors(self, query: str | None = None) -> list[Collaborator]:
        params = {
            "query": query or SEMANTIC_SCHOLAR_DEFAULT_QUERY,
            "limit": SEMANTIC_SCHOLAR_LIMIT,
            "fields": "name,affiliations",
        }
        data = await self._rest_get(
            SEMANTIC_SCHOLAR_AUTHOR_SEARCH_URL,
            params,
            context=RequestContext(source=self._source_name, method="search_authors"),
        )
        with self._parsing("search_authors"):
            return [self._parse_author(a) for a in data.get("data") or []]

    @staticmethod
    def _parse_author(author: dict[str, Any]) -> Collaborator:
        affiliations = author.get("affiliations") or []
        return Collaborator(
            id=author.get("authorId"),
            name=author.get("name"),
            institution=affiliations[0] if affiliations else "Unknown",
        )
