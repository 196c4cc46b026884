from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator

from app.schemas.common import RiskBucket


class AssessRequest(BaseModel):
    url: str = Field(..., description="URL to assess; malformed values score 100")


class AssessResponse(BaseModel):
    url: str
    score: int = Field(..., ge=0, le=100)
    details: str
    bucket: RiskBucket


class BulkAssessRequest(BaseModel):
    urls: List[str] = Field(default_factory=list)
    text: str = Field("", description="Free text split on newlines, commas and whitespace")

    @model_validator(mode="after")
    def ensure_payload(self) -> "BulkAssessRequest":
        if not self.urls and not self.text.strip():
            raise ValueError("Provide at least one URL or a block of text to scan")
        return self


class BulkAssessResponse(BaseModel):
    results: List[AssessResponse]


class FeedScanResponse(BaseModel):
    source: str
    results: List[AssessResponse]
