from fastapi import APIRouter, Depends

from curalink.api.dependencies import get_summarizer
from curalink.models.model_summary import SummaryRequest
from curalink.services.summarizer import Summarizer

router = APIRouter()


@router.post("/ai-summary")
async def ai_summary(
    body: SummaryRequest, summarizer: Summarizer = Depends(get_summarizer)
):
    """Summarize free-text symptoms into research, trials, experts and next steps."""
    return {"summary": await summarizer.summarize(body.symptoms)}
