"""
NIH RePORTER project search client.

Unlike the other sources this one takes a structured POST body. Missing
fields on a project are filled in per item rather than dropping the record.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from curalink.constants import (
    MISSING_URL,
    NIH_REPORTER_DEFAULT_QUERY,
    NIH_REPORTER_FIELDS,
    NIH_REPORTER_LIMIT,
    NIH_REPORTER_PROJECT_URL,
    NIH_REPORTER_SEARCH_URL,
)
from curalink.data_sources.base_client import BaseClient, RequestContext
from curalink.models.model_research import Grant

logger = logging.getLogger("curalink.data_sources.nih_reporter")


class NIHReporterClient(BaseClient):
    """Client for the NIH RePORTER v2 API."""

    @property
    def _source_name(self) -> str:
        return "nih_reporter"

    async def search_grants(self, query: str | None = None) -> list[Grant]:
        text = query or NIH_REPORTER_DEFAULT_QUERY
        body = {
            "criteria": {"text": text},
            "include_fields": NIH_REPORTER_FIELDS,
            "offset": 0,
            "limit": NIH_REPORTER_LIMIT,
        }
        data = await self._rest_post(
            NIH_REPORTER_SEARCH_URL,
            body,
            context=RequestContext(source=self._source_name, method="search_grants"),
        )
        with self._parsing("search_grants"):
            projects = data.get("results") or []
            return [self._parse_project(p, i, text) for i, p in enumerate(projects)]

    @classmethod
    def _parse_project(cls, project: dict[str, Any], index: int, query: str) -> Grant:
        project_num = project.get("project_num")
        pis = project.get("principal_investigators") or [{}]
        title = (project.get("project_title") or "").strip()

        return Grant(
            id=project_num or f"grant-{index}",
            title=title or f"{query} Research Grant",
            agency=project.get("agency") or "NIH",
            organization=(project.get("organization") or {}).get("org_name")
            or "Unknown Organization",
            pi=(pis[0] or {}).get("pi_name") or "Unknown PI",
            amount=cls._format_amount(project.get("award_amount")),
            url=NIH_REPORTER_PROJECT_URL.format(project_num=project_num)
            if project_num
            else MISSING_URL,
        )

    @staticmethod
    def _format_amount(amount: Any) -> str:
        """Render an award amount as "$1,234,567".

        Fractions keep up to three digits with trailing zeros dropped, so
        1234.5 renders as "$1,234.5". Absent or zero is "Not disclosed".
        """
        if not amount:
            return "Not disclosed"
        try:
            value = float(amount)
        except (TypeError, ValueError):
            logger.debug("Unparseable award_amount %r", amount)
            return "Not disclosed"
        if not math.isfinite(value):
            return "Not disclosed"
        return "$" + f"{value:,.3f}".rstrip("0").rstrip(".")
