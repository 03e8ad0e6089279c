"""Pydantic models for ORCID researcher profiles."""

from pydantic import BaseModel


class Work(BaseModel):
    """One publication listed on a researcher's ORCID record."""

    title: str | None = None
    year: str | None = None


class ResearcherProfile(BaseModel):
    """A researcher profile assembled from an ORCID record."""

    id: str  # ORCID iD, e.g. "0000-0002-1825-0097"
    name: str
    biography: str = ""
    works: list[Work] = []
    link: str
