"""Refinement service that folds user feedback back into stored threat scores."""

from __future__ import annotations

import logging
from typing import List, Optional

from core.feedback.refiner import FeedbackRefiner, FeedbackVerdict, RefinementOutcome
from storage.threatdb import ThreatRecord, ThreatStore

logger = logging.getLogger(__name__)


class RefinementService:
    def __init__(self, store: ThreatStore, refiner: Optional[FeedbackRefiner] = None):
        self.store = store
        self.refiner = refiner or FeedbackRefiner()

    def refine(self, url: str, verdict: FeedbackVerdict | str) -> bool:
        """Record a verdict for ``url``; returns False when the URL was never assessed."""
        verdict = FeedbackVerdict(verdict)
        outcomes: List[RefinementOutcome] = []

        def _apply(record: ThreatRecord) -> None:
            outcomes.append(self.refiner.apply(record, verdict))

        if not self.store.mutate(url, _apply):
            logger.debug("Ignoring %s feedback for unassessed URL %s", verdict.value, url)
            return False

        outcome = outcomes[-1]
        if outcome.nudged:
            logger.info(
                "Feedback dispute on %s (accuracy %.2f): score %d -> %d",
                url,
                outcome.accuracy_ratio,
                outcome.previous_score,
                outcome.score,
            )
        return True
