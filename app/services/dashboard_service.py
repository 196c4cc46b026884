"""Aggregate views over stored threat records for dashboards."""

from __future__ import annotations

from typing import Dict, Optional

from core.feedback.refiner import FeedbackRefiner
from core.scoring.buckets import RiskBucket, bucket_for
from storage.threatdb import ThreatStore


class DashboardService:
    def __init__(self, store: ThreatStore, refiner: Optional[FeedbackRefiner] = None):
        self.store = store
        self.refiner = refiner or FeedbackRefiner()

    def summary(self) -> Dict:
        records = self.store.records()
        distribution = {bucket.value: 0 for bucket in RiskBucket}
        total_feedback = 0
        disputed = 0
        for record in records.values():
            distribution[bucket_for(record.score).value] += 1
            total_feedback += record.feedback_count
            if self.refiner.is_disputed(record):
                disputed += 1
        return {
            "total_records": len(records),
            "distribution": distribution,
            "total_feedback": total_feedback,
            "disputed_records": disputed,
        }
