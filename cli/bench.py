from __future__ import annotations

import time

from app.services.assessment_service import AssessmentService
from storage.threatdb import ThreatStore


def main() -> None:
    service = AssessmentService(ThreatStore())
    urls = [f"https://bench-{idx}.example.com/offer/{idx * 7919}" for idx in range(5000)]
    start = time.time()
    service.assess_many(urls)
    first_pass = (time.time() - start) * 1000
    start = time.time()
    service.assess_many(urls)
    cached_pass = (time.time() - start) * 1000
    print(f"Assess {len(urls)} new URLs ~= {first_pass:.2f} ms")
    print(f"Re-assess {len(urls)} stored URLs ~= {cached_pass:.2f} ms")


if __name__ == "__main__":
    main()
