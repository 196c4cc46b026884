from __future__ import annotations

from pydantic import BaseModel

from app.schemas.common import FeedbackVerdict


class FeedbackRequest(BaseModel):
    url: str
    verdict: FeedbackVerdict


class FeedbackResponse(BaseModel):
    url: str
    accepted: bool
