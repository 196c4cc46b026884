"""Scan links produced by an external feed through the assessment service."""

from __future__ import annotations

import logging
from typing import Dict

from app.services.assessment_service import AssessmentService
from core.feeds import FeedSource

logger = logging.getLogger(__name__)


class FeedScanService:
    def __init__(self, assessments: AssessmentService):
        self.assessments = assessments

    def scan(self, source: FeedSource) -> Dict:
        """Fetch every link first, then assess each one like a manually entered URL.

        FeedUnavailableError propagates before any record is touched.
        """
        links = source.fetch_links()
        results = self.assessments.assess_many(links)
        logger.info("Scanned %d links from %s feed", len(results), source.name)
        return {"source": source.name, "results": [result.to_dict() for result in results]}
