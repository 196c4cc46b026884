"""Dataclass representing the persisted per-URL threat state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ThreatRecord:
    """Current score of a URL plus the feedback gathered about it."""

    score: int
    feedback_count: int = 0
    positive_count: int = 0
    negative_count: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.score <= 100:
            raise ValueError(f"score must be within [0, 100], got {self.score}")
        if min(self.feedback_count, self.positive_count, self.negative_count) < 0:
            raise ValueError("feedback counters must be non-negative")
        if self.positive_count + self.negative_count != self.feedback_count:
            raise ValueError("positive_count + negative_count must equal feedback_count")

    def accuracy_ratio(self) -> float:
        """Share of feedback that agreed with the score; 1.0 before any feedback."""
        if self.feedback_count == 0:
            return 1.0
        return self.positive_count / self.feedback_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "feedback_count": self.feedback_count,
            "positive_count": self.positive_count,
            "negative_count": self.negative_count,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ThreatRecord":
        return cls(
            score=int(payload["score"]),
            feedback_count=int(payload.get("feedback_count", 0)),
            positive_count=int(payload.get("positive_count", 0)),
            negative_count=int(payload.get("negative_count", 0)),
        )
