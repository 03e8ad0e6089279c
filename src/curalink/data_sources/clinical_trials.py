"""ClinicalTrials.gov REST API v2 client."""

from __future__ import annotations

from typing import Any

from curalink.constants import (
    CLINICAL_TRIALS_BASE_URL,
    CLINICAL_TRIALS_DEFAULT_CONDITION,
    CLINICAL_TRIALS_PAGE_SIZE,
    CLINICAL_TRIALS_STUDY_URL,
    MISSING_URL,
)
from curalink.data_sources.base_client import BaseClient, RequestContext
from curalink.models.model_clinical_trials import Trial


class ClinicalTrialsClient(BaseClient):
    @property
    def _source_name(self) -> str:
        return "clinical_trials"

    async def search_trials(
        self,
        condition: str | None = None,
        page_size: int = CLINICAL_TRIALS_PAGE_SIZE,
    ) -> list[Trial]:
        """Search trials by free-text term; defaults to "cancer"."""
        params = {
            "query.term": condition or CLINICAL_TRIALS_DEFAULT_CONDITION,
            "pageSize": page_size,
        }
        data = await self._rest_get(
            CLINICAL_TRIALS_BASE_URL,
            params,
            context=RequestContext(source=self._source_name, method="search_trials"),
        )
        with self._parsing("search_trials"):
            return [self._parse_trial(s) for s in data.get("studies") or []]

    # ------------------------------------------------------------------
    # Parsers: v2 API response → Pydantic models
    # ------------------------------------------------------------------

    def _parse_trial(self, study: dict) -> Trial:
        proto = study.get("protocolSection") or {}
        ident = proto.get("identificationModule") or {}
        status = proto.get("statusModule") or {}
        conditions = (proto.get("conditionsModule") or {}).get("conditions") or []
        locations = (proto.get("contactsLocationsModule") or {}).get("locations") or []

        nct_id = ident.get("nctId")
        facilities = [self._facility_name(loc) for loc in locations]

        return Trial(
            id=nct_id,
            title=ident.get("briefTitle")
            or ident.get("officialTitle")
            or "Untitled Trial",
            status=status.get("overallStatus") or "Status Unknown",
            condition=", ".join(conditions) or "Condition not specified",
            location=", ".join(f for f in facilities if f) or "No locations listed",
            url=CLINICAL_TRIALS_STUDY_URL.format(nct_id=nct_id) if nct_id else MISSING_URL,
        )

    @staticmethod
    def _facility_name(location: dict[str, Any]) -> str:
        # v2 returns facility as a plain string; older payloads nest it.
        facility = location.get("facility")
        if isinstance(facility, dict):
            return facility.get("name") or ""
        return facility or ""
