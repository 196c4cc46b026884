"""Rule-based URL threat scoring.

Every URL starts from a neutral score of 50. Each rule below is evaluated
against the unmodified URL string and contributes a fixed adjustment; the sum
is clamped to [0, 100]. The rule table is the complete threat model and is
deliberately small so that every score can be audited by hand.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Tuple
from urllib.parse import urlsplit

from core.scoring.buckets import RiskBucket, bucket_for

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

SUSPICIOUS_TLDS: Tuple[str, ...] = ("xyz", "tk", "ml", "ga", "cf", "gq", "top")
TRUSTED_TLDS: Tuple[str, ...] = ("gov", "edu")
LURE_KEYWORDS: Tuple[str, ...] = ("free", "win", "prize", "discount", "deal", "offer", "limited", "exclusive")

_LURE_PATTERN = re.compile("|".join(LURE_KEYWORDS), re.IGNORECASE)
_DIGIT_RUN_PATTERN = re.compile(r"[0-9]{5,}")
_LONG_LABEL_PATTERN = re.compile(r"[a-zA-Z0-9]{15,}\.")

EXPLANATIONS = {
    RiskBucket.low: (
        "This link appears to be safe. It follows security best practices "
        "and doesn't contain suspicious patterns."
    ),
    RiskBucket.medium: (
        "This link has some suspicious characteristics but isn't definitively "
        "malicious. Exercise caution when visiting."
    ),
    RiskBucket.high: (
        "This link shows multiple high-risk indicators and may be unsafe. "
        "It's recommended to avoid visiting this website."
    ),
}


@dataclass(frozen=True)
class _ParsedURL:
    raw: str
    scheme: str
    host: str


@dataclass(frozen=True)
class HeuristicRule:
    rule_id: str
    description: str
    adjustment: int
    predicate: Callable[[_ParsedURL], bool]


@dataclass(frozen=True)
class RuleHit:
    rule_id: str
    description: str
    adjustment: int

    def to_dict(self) -> dict:
        return {"id": self.rule_id, "description": self.description, "adjustment": self.adjustment}


@dataclass
class ScoreBreakdown:
    """Clamped score plus the rules that produced it."""

    score: int
    raw_total: int
    hits: List[RuleHit] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "raw_total": self.raw_total,
            "hits": [hit.to_dict() for hit in self.hits],
        }


def _host_has_tld(host: str, tlds: Tuple[str, ...]) -> bool:
    return any(host.endswith("." + tld) for tld in tlds)


RULES: Tuple[HeuristicRule, ...] = (
    HeuristicRule(
        "suspicious_tld",
        "Host uses a top-level domain popular with throwaway sites",
        15,
        lambda url: _host_has_tld(url.host, SUSPICIOUS_TLDS),
    ),
    HeuristicRule(
        "trusted_tld",
        "Host is under a government or education domain",
        -20,
        lambda url: _host_has_tld(url.host, TRUSTED_TLDS),
    ),
    HeuristicRule(
        "lure_keyword",
        "URL contains promotional lure wording",
        10,
        lambda url: _LURE_PATTERN.search(url.raw) is not None,
    ),
    HeuristicRule(
        "https_scheme",
        "Connection is encrypted with HTTPS",
        -5,
        lambda url: url.scheme == "https",
    ),
    HeuristicRule(
        "plain_http_scheme",
        "Connection is not encrypted",
        10,
        lambda url: url.scheme != "https",
    ),
    HeuristicRule(
        "long_digit_run",
        "URL contains a long run of digits",
        5,
        lambda url: _DIGIT_RUN_PATTERN.search(url.raw) is not None,
    ),
    HeuristicRule(
        "long_label",
        "URL contains an unusually long alphanumeric label",
        10,
        lambda url: _LONG_LABEL_PATTERN.search(url.raw) is not None,
    ),
)


def _parse(url: str) -> _ParsedURL:
    try:
        parts = urlsplit(url.strip())
        host = (parts.hostname or "").rstrip(".")
        scheme = parts.scheme.lower()
    except ValueError:
        host, scheme = "", ""
    return _ParsedURL(raw=url, scheme=scheme, host=host.lower())


def clamp_score(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, value))


def score_breakdown(url: str) -> ScoreBreakdown:
    """Evaluate every rule against ``url`` and return the clamped result."""
    parsed = _parse(url)
    hits = [
        RuleHit(rule.rule_id, rule.description, rule.adjustment)
        for rule in RULES
        if rule.predicate(parsed)
    ]
    raw_total = BASE_SCORE + sum(hit.adjustment for hit in hits)
    return ScoreBreakdown(score=clamp_score(raw_total), raw_total=raw_total, hits=hits)


def score(url: str) -> int:
    """Return the heuristic threat score of ``url`` in [0, 100]."""
    return score_breakdown(url).score


def explain(score_value: int) -> str:
    """Return the rationale text for the bucket ``score_value`` falls into."""
    return EXPLANATIONS[bucket_for(score_value)]
