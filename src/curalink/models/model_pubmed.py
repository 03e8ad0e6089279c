"""
Pydantic models for PubMed data.

These are the data contracts between the PubMed client and the router.
Routes receive these models - they never see raw esummary responses.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Paper(BaseModel):
    """A single PubMed article summary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str  # PubMed identifier (e.g. "38472913")
    title: str = ""
    journal: str = ""  # full journal name, falling back to the source abbreviation
    pub_date: str = ""  # free-form, as reported by NCBI (e.g. "2023 Jun 15")
    authors: str = ""  # comma-joined author names
    link: str
