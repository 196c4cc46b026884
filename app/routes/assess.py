from __future__ import annotations

from fastapi import APIRouter

from app.deps import get_assessment_service
from app.schemas.assess import AssessRequest, AssessResponse, BulkAssessRequest, BulkAssessResponse
from app.services.assessment_service import split_bulk_input

router = APIRouter()


@router.post("/assess", response_model=AssessResponse)
def assess_endpoint(payload: AssessRequest) -> AssessResponse:
    result = get_assessment_service().assess(payload.url)
    return AssessResponse(**result.to_dict())


@router.post("/assess/bulk", response_model=BulkAssessResponse)
def assess_bulk_endpoint(payload: BulkAssessRequest) -> BulkAssessResponse:
    urls = list(payload.urls) + split_bulk_input(payload.text)
    results = get_assessment_service().assess_many(urls)
    return BulkAssessResponse(results=[AssessResponse(**result.to_dict()) for result in results])
