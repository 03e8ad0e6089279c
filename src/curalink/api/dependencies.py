"""FastAPI dependencies: per-request services and the process-wide clients."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from curalink.config import get_settings
from curalink.data_sources.clinical_trials import ClinicalTrialsClient
from curalink.data_sources.europe_pmc import EuropePMCClient
from curalink.data_sources.nih_reporter import NIHReporterClient
from curalink.data_sources.orcid import OrcidClient
from curalink.data_sources.pubmed import PubMedClient
from curalink.data_sources.semantic_scholar import SemanticScholarClient
from curalink.data_sources.serpapi import SerpApiClient
from curalink.db.session import get_db
from curalink.services.auth import AuthService
from curalink.services.credential_store import CredentialStore
from curalink.services.summarizer import Summarizer


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(CredentialStore(db), get_settings().jwt_secret_key)


# Singletons built in the lifespan handler (see curalink.api.main).


def get_pubmed_client(request: Request) -> PubMedClient:
    return request.app.state.pubmed


def get_clinical_trials_client(request: Request) -> ClinicalTrialsClient:
    return request.app.state.clinical_trials


def get_orcid_client(request: Request) -> OrcidClient:
    return request.app.state.orcid


def get_serpapi_client(request: Request) -> SerpApiClient:
    return request.app.state.serpapi


def get_europe_pmc_client(request: Request) -> EuropePMCClient:
    return request.app.state.europe_pmc


def get_semantic_scholar_client(request: Request) -> SemanticScholarClient:
    return request.app.state.semantic_scholar


def get_nih_reporter_client(request: Request) -> NIHReporterClient:
    return request.app.state.nih_reporter


def get_summarizer(request: Request) -> Summarizer:
    return request.app.state.summarizer
