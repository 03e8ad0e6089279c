"""
Pydantic models for the research dashboard data sources.

Covers Europe PMC papers, Semantic Scholar collaborators and NIH RePORTER grants.
"""

from pydantic import BaseModel


class ResearchPaper(BaseModel):
    """A Europe PMC search hit."""

    title: str | None = None
    authors: str
    link: str


class Collaborator(BaseModel):
    """A Semantic Scholar author who may be a potential collaborator."""

    id: str | None = None  # Semantic Scholar authorId
    name: str | None = None
    institution: str


class Grant(BaseModel):
    """A funded NIH project."""

    id: str  # project number, or "grant-{index}" when missing
    title: str
    agency: str
    organization: str
    pi: str
    amount: str  # formatted, e.g. "$1,234,567" or "Not disclosed"
    url: str
