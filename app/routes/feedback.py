from __future__ import annotations

from fastapi import APIRouter

from app.deps import get_refinement_service
from app.schemas.feedback import FeedbackRequest, FeedbackResponse

router = APIRouter()


@router.post("/feedback", response_model=FeedbackResponse)
def feedback_endpoint(payload: FeedbackRequest) -> FeedbackResponse:
    accepted = get_refinement_service().refine(payload.url, payload.verdict)
    return FeedbackResponse(url=payload.url, accepted=accepted)
