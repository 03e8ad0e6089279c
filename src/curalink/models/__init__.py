"""Data models for CuraLink."""

from curalink.models.model_clinical_trials import Trial
from curalink.models.model_orcid import ResearcherProfile, Work
from curalink.models.model_pubmed import Paper
from curalink.models.model_research import Collaborator, Grant, ResearchPaper
from curalink.models.model_serpapi import SiteSearchResult
from curalink.models.model_user import Gender, UserRecord, UserType

__all__ = [
    "Collaborator",
    "Gender",
    "Grant",
    "Paper",
    "ResearchPaper",
    "ResearcherProfile",
    "SiteSearchResult",
    "Trial",
    "UserRecord",
    "UserType",
    "Work",
]
