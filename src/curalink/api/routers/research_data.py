"""Researcher dashboard data: papers, collaborators and grants."""

from fastapi import APIRouter, Depends

from curalink.api.dependencies import (
    get_europe_pmc_client,
    get_nih_reporter_client,
    get_semantic_scholar_client,
)
from curalink.api.errors import upstream_errors
from curalink.data_sources.europe_pmc import EuropePMCClient
from curalink.data_sources.nih_reporter import NIHReporterClient
from curalink.data_sources.semantic_scholar import SemanticScholarClient

router = APIRouter()


@router.get("/papers")
async def papers(
    topic: str | None = None, client: EuropePMCClient = Depends(get_europe_pmc_client)
):
    with upstream_errors("Failed to fetch papers"):
        results = await client.search_papers(topic)
    return {"results": results}


@router.get("/collaborations")
async def collaborations(
    query: str | None = None,
    client: SemanticScholarClient = Depends(get_semantic_scholar_client),
):
    with upstream_errors("Failed to fetch collaborations"):
        results = await client.search_authors(query)
    return {"results": results}


@router.get("/grants")
async def grants(
    query: str | None = None,
    client: NIHReporterClient = Depends(get_nih_reporter_client),
):
    with upstream_errors("Failed to fetch grants data"):
        results = await client.search_grants(query)
    return {"results": results}
