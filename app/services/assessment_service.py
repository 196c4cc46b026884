"""Assessment service that validates, scores and records URLs."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

from core.scoring.buckets import RiskBucket, bucket_for
from core.scoring.heuristics import MAX_SCORE, explain, score_breakdown
from core.validation.url_validator import validate
from storage.threatdb import ThreatRecord, ThreatStore

logger = logging.getLogger(__name__)

INVALID_URL_DETAILS = "Invalid URL format. Please enter a valid URL starting with http:// or https://"

_BULK_SEPARATORS = re.compile(r"[\n,\s]+")


@dataclass
class AssessmentResult:
    url: str
    score: int
    details: str
    bucket: RiskBucket

    def to_dict(self) -> Dict:
        payload = asdict(self)
        payload["bucket"] = self.bucket.value
        return payload


def split_bulk_input(text: str) -> List[str]:
    """Split free text on newlines, commas and whitespace into candidate URLs."""
    return [part for part in _BULK_SEPARATORS.split(text or "") if part]


class AssessmentService:
    def __init__(self, store: ThreatStore):
        self.store = store

    def assess(self, raw_url: str) -> AssessmentResult:
        """Return the current threat score for ``raw_url``, scoring it on first sight.

        Malformed URLs are maximally untrusted and never reach the store.
        """
        if not validate(raw_url):
            return AssessmentResult(raw_url, MAX_SCORE, INVALID_URL_DETAILS, bucket_for(MAX_SCORE))

        existing = self.store.get(raw_url)
        if existing is not None:
            return self._result(raw_url, existing.score)

        breakdown = score_breakdown(raw_url)
        logger.debug(
            "Heuristic breakdown for %s: %s",
            raw_url,
            ", ".join(f"{hit.rule_id}{hit.adjustment:+d}" for hit in breakdown.hits) or "no rules fired",
        )
        stored = self.store.insert_if_absent(raw_url, ThreatRecord(score=breakdown.score))
        logger.info("Assessed new URL %s with score %d", raw_url, stored.score)
        return self._result(raw_url, stored.score)

    def assess_many(self, urls: Iterable[str]) -> List[AssessmentResult]:
        return [self.assess(url) for url in urls]

    @staticmethod
    def _result(url: str, score: int) -> AssessmentResult:
        return AssessmentResult(url, score, explain(score), bucket_for(score))
