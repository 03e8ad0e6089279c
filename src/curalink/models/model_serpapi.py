"""Pydantic models for SerpApi search results."""

from pydantic import BaseModel


class SiteSearchResult(BaseModel):
    """An organic web result restricted to a single site."""

    title: str | None = None
    link: str | None = None
    snippet: str | None = None
