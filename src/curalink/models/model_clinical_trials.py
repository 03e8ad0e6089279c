"""
Pydantic models for ClinicalTrials.gov data.

These are the data contracts between the ClinicalTrials.gov client and the router.
"""

from pydantic import BaseModel


class Trial(BaseModel):
    """A single clinical trial, flattened for display."""

    id: str | None = None  # NCT identifier; None if the registry omitted it
    title: str
    status: str  # "RECRUITING", "COMPLETED", ... or "Status Unknown"
    condition: str  # comma-joined conditions
    location: str  # comma-joined facility names
    url: str
