"""Patient dashboard data: literature, trials, researcher profiles, scholar search."""

from fastapi import APIRouter, Depends

from curalink.api.dependencies import (
    get_clinical_trials_client,
    get_orcid_client,
    get_pubmed_client,
    get_serpapi_client,
)
from curalink.api.errors import upstream_errors
from curalink.data_sources.clinical_trials import ClinicalTrialsClient
from curalink.data_sources.orcid import OrcidClient
from curalink.data_sources.pubmed import PubMedClient
from curalink.data_sources.serpapi import SerpApiClient
from curalink.exceptions import ValidationError

router = APIRouter()


@router.get("/pubmed")
async def pubmed(
    query: str | None = None, client: PubMedClient = Depends(get_pubmed_client)
):
    if not query:
        raise ValidationError("Missing query parameter")
    with upstream_errors("PubMed fetch failed"):
        papers = await client.search_papers(query)
    return {"results": papers}


@router.get("/trials")
async def trials(
    condition: str | None = None,
    client: ClinicalTrialsClient = Depends(get_clinical_trials_client),
):
    with upstream_errors("Failed to fetch Clinical Trials"):
        results = await client.search_trials(condition)
    return {"results": results}


@router.get("/orcid")
async def orcid(name: str | None = None, client: OrcidClient = Depends(get_orcid_client)):
    if not name:
        raise ValidationError("Missing name")
    with upstream_errors("ORCID fetch failed"):
        profiles = await client.search_profiles(name)
    return {"results": profiles}


@router.get("/scholar")
async def scholar(
    topic: str | None = None, client: SerpApiClient = Depends(get_serpapi_client)
):
    if not topic:
        raise ValidationError("Missing topic")
    with upstream_errors("Scholar fetch failed"):
        results = await client.search_scholar(topic)
    return {"results": results}


@router.get("/researchgate")
async def researchgate(
    topic: str | None = None, client: SerpApiClient = Depends(get_serpapi_client)
):
    if not topic:
        raise ValidationError("Missing topic")
    with upstream_errors("ResearchGate fetch failed"):
        results = await client.search_site(topic)
    return {"results": results}
