"""
ORCID public API client.

Profile lookup is a two-tier fan-out: one search call for candidate iDs,
then one record call per candidate, issued sequentially and capped at
ORCID_MAX_PROFILES. A failing record call fails the whole lookup.
"""

from __future__ import annotations

import logging
from typing import Any

from curalink.constants import (
    ORCID_API_URL,
    ORCID_MAX_PROFILES,
    ORCID_MAX_WORKS,
    ORCID_PROFILE_URL,
)
from curalink.data_sources.base_client import BaseClient, RequestContext
from curalink.models.model_orcid import ResearcherProfile, Work

logger = logging.getLogger("curalink.data_sources.orcid")

_JSON_HEADERS = {"Accept": "application/json"}


class OrcidClient(BaseClient):
    """Client for the ORCID v3.0 public API."""

    @property
    def _source_name(self) -> str:
        return "orcid"

    # -- Public methods -------------------------------------------------------

    async def search_profiles(self, name: str) -> list[ResearcherProfile]:
        """Search researchers by name and expand the first few into profiles."""
        data = await self._rest_get(
            f"{ORCID_API_URL}/search/",
            {"q": name},
            headers=_JSON_HEADERS,
            context=RequestContext(source=self._source_name, method="search"),
        )
        with self._parsing("search"):
            candidates = data.get("result") or []
            orcids = [
                (c.get("orcid-identifier") or {}).get("path")
                for c in candidates[:ORCID_MAX_PROFILES]
            ]

        profiles: list[ResearcherProfile] = []
        for orcid in orcids:
            if not orcid:
                logger.debug("Skipping ORCID search hit without an identifier")
                continue
            profiles.append(await self.get_profile(orcid))

        return profiles

    async def get_profile(self, orcid: str) -> ResearcherProfile:
        record = await self._rest_get(
            f"{ORCID_API_URL}/{orcid}",
            headers=_JSON_HEADERS,
            context=RequestContext(
                source=self._source_name, method="get_profile", params={"orcid": orcid}
            ),
        )
        with self._parsing("get_profile"):
            return self._parse_record(orcid, record)

    # -- Parsers --------------------------------------------------------------

    @classmethod
    def _parse_record(cls, orcid: str, record: dict[str, Any]) -> ResearcherProfile:
        person = record.get("person") or {}
        name = person.get("name") or {}
        given = cls._value(name.get("given-names"))
        family = cls._value(name.get("family-name"))
        biography = (person.get("biography") or {}).get("content") or ""

        groups = ((record.get("activities-summary") or {}).get("works") or {}).get(
            "group"
        ) or []

        return ResearcherProfile(
            id=orcid,
            name=f"{given} {family}".strip(),
            biography=biography,
            works=[cls._parse_work(g) for g in groups[:ORCID_MAX_WORKS]],
            link=ORCID_PROFILE_URL.format(orcid=orcid),
        )

    @classmethod
    def _parse_work(cls, group: dict[str, Any]) -> Work:
        summaries = group.get("work-summary") or [{}]
        summary = summaries[0] or {}
        title = cls._value((summary.get("title") or {}).get("title")) or None
        year = cls._value((summary.get("publication-date") or {}).get("year")) or None
        return Work(title=title, year=year)

    @staticmethod
    def _value(node: dict[str, Any] | None) -> str:
        """Unwrap ORCID's ``{"value": ...}`` leaf nodes."""
        if not node:
            return ""
        return node.get("value") or ""
