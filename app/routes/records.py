from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from app.deps import get_dashboard_service, get_store
from app.schemas.records import DashboardResponse, ThreatRecordResponse
from core.scoring.buckets import bucket_for

router = APIRouter()


@router.get("/records", response_model=ThreatRecordResponse)
def record_endpoint(url: str = Query(..., description="URL exactly as it was assessed")) -> ThreatRecordResponse:
    record = get_store().get(url)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="RECORD_NOT_FOUND",
        )
    return ThreatRecordResponse(url=url, bucket=bucket_for(record.score), **record.to_dict())


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard_endpoint() -> DashboardResponse:
    return DashboardResponse(**get_dashboard_service().summary())
