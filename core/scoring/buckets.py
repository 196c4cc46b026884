"""Risk buckets shared by scoring, refinement reporting and the dashboard."""

from __future__ import annotations

from enum import Enum

LOW_UPPER_BOUND = 30
HIGH_LOWER_BOUND = 70


class RiskBucket(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


def bucket_for(score: int) -> RiskBucket:
    """Map a 0-100 score onto Low (<30), Medium ([30,70)) or High (>=70)."""
    if score < LOW_UPPER_BOUND:
        return RiskBucket.low
    if score < HIGH_LOWER_BOUND:
        return RiskBucket.medium
    return RiskBucket.high
