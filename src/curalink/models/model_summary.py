"""AI summary request body."""

from pydantic import BaseModel


class SummaryRequest(BaseModel):
    symptoms: str | None = None
