from __future__ import annotations

from app.services.dashboard_service import DashboardService
from storage.threatdb import ThreatRecord, ThreatStore


def test_empty_store_summary():
    summary = DashboardService(ThreatStore()).summary()
    assert summary == {
        "total_records": 0,
        "distribution": {"low": 0, "medium": 0, "high": 0},
        "total_feedback": 0,
        "disputed_records": 0,
    }


def test_distribution_uses_bucket_boundaries():
    store = ThreatStore()
    for idx, score in enumerate([0, 29, 30, 69, 70, 100]):
        store.put(f"https://site{idx}.example/", ThreatRecord(score=score))
    store.put(
        "https://disputed.example/",
        ThreatRecord(score=60, feedback_count=4, positive_count=1, negative_count=3),
    )
    summary = DashboardService(store).summary()
    assert summary["total_records"] == 7
    assert summary["distribution"] == {"low": 2, "medium": 3, "high": 2}
    assert summary["total_feedback"] == 4
    assert summary["disputed_records"] == 1
