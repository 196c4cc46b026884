from __future__ import annotations

from core.feedback.refiner import FeedbackVerdict
from core.scoring.buckets import RiskBucket

__all__ = ["FeedbackVerdict", "RiskBucket"]
