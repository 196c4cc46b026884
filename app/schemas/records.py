from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

from app.schemas.common import RiskBucket


class ThreatRecordResponse(BaseModel):
    url: str
    score: int = Field(..., ge=0, le=100)
    bucket: RiskBucket
    feedback_count: int = Field(..., ge=0)
    positive_count: int = Field(..., ge=0)
    negative_count: int = Field(..., ge=0)


class DashboardResponse(BaseModel):
    total_records: int
    distribution: Dict[str, int]
    total_feedback: int
    disputed_records: int
