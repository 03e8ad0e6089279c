"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from curalink import __version__
from curalink.api.errors import install_error_handlers
from curalink.api.routers import ai_summary, auth, patient_data, research_data
from curalink.config import get_settings
from curalink.constants import USER_AGENT_TEMPLATE
from curalink.data_sources.base_client import ClientConfig
from curalink.data_sources.clinical_trials import ClinicalTrialsClient
from curalink.data_sources.europe_pmc import EuropePMCClient
from curalink.data_sources.nih_reporter import NIHReporterClient
from curalink.data_sources.orcid import OrcidClient
from curalink.data_sources.pubmed import PubMedClient
from curalink.data_sources.semantic_scholar import SemanticScholarClient
from curalink.data_sources.serpapi import SerpApiClient
from curalink.db.base import Base
from curalink.db.session import get_engine
from curalink.services.summarizer import Summarizer

# registers the User table on Base.metadata
import curalink.sqlalchemy.users  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Startup: create tables, then build the process-wide clients
    engine = get_engine()
    Base.metadata.create_all(engine)

    polite = ClientConfig(user_agent=USER_AGENT_TEMPLATE.format(email=settings.contact_email))
    app.state.pubmed = PubMedClient(polite)
    app.state.clinical_trials = ClinicalTrialsClient()
    app.state.orcid = OrcidClient(polite)
    app.state.serpapi = SerpApiClient(settings.serpapi_api_key)
    app.state.europe_pmc = EuropePMCClient()
    app.state.semantic_scholar = SemanticScholarClient()
    app.state.nih_reporter = NIHReporterClient()
    app.state.summarizer = Summarizer(settings.anthropic_api_key, settings.summary_model)
    logger.info("CuraLink %s started", __version__)

    yield

    # Shutdown
    for client in (
        app.state.pubmed,
        app.state.clinical_trials,
        app.state.orcid,
        app.state.serpapi,
        app.state.europe_pmc,
        app.state.semantic_scholar,
        app.state.nih_reporter,
        app.state.summarizer,
    ):
        await client.close()
    engine.dispose()


app = FastAPI(
    title="CuraLink API",
    description="Patient and researcher accounts plus aggregated biomedical research data",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(patient_data.router, prefix="/api/patient-data", tags=["Patient data"])
app.include_router(research_data.router, prefix="/api/research-data", tags=["Research data"])
app.include_router(ai_summary.router, prefix="/api", tags=["AI summary"])


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
