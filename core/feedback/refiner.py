"""Feedback-driven score refinement applied to a single threat record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from storage.threatdb.models import ThreatRecord


class FeedbackVerdict(str, Enum):
    positive = "positive"
    negative = "negative"


@dataclass
class RefinementOutcome:
    """Summary of one feedback application, used for logging and tests."""

    previous_score: int
    score: int
    accuracy_ratio: float
    nudged: bool


class FeedbackRefiner:
    """Counts verdicts and nudges persistently disputed scores toward the middle band."""

    def __init__(self, cfg: Optional[Dict] = None):
        cfg = cfg or {}
        self.accuracy_threshold = cfg.get("accuracy_threshold", 0.7)
        self.min_feedback = cfg.get("min_feedback", 3)
        self.step = cfg.get("step", 10)
        self.pivot = cfg.get("pivot", 50)
        self.floor = cfg.get("floor", 30)
        self.ceiling = cfg.get("ceiling", 70)

    def is_disputed(self, record: ThreatRecord) -> bool:
        """True when enough feedback exists and too little of it agrees with the score."""
        if record.feedback_count < self.min_feedback:
            return False
        return record.accuracy_ratio() < self.accuracy_threshold

    def nudge(self, score: int) -> int:
        if score > self.pivot:
            return max(self.floor, score - self.step)
        return min(self.ceiling, score + self.step)

    def apply(self, record: ThreatRecord, verdict: FeedbackVerdict) -> RefinementOutcome:
        """Record ``verdict`` on ``record`` in place and adjust its score if disputed."""
        verdict = FeedbackVerdict(verdict)
        previous = record.score
        record.feedback_count += 1
        if verdict is FeedbackVerdict.positive:
            record.positive_count += 1
        else:
            record.negative_count += 1

        ratio = record.accuracy_ratio()
        nudged = False
        if self.is_disputed(record):
            record.score = self.nudge(record.score)
            nudged = True
        return RefinementOutcome(previous_score=previous, score=record.score, accuracy_ratio=ratio, nudged=nudged)
