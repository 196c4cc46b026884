"""Exception types raised around the LinkGuard core."""

from __future__ import annotations


class LinkGuardError(RuntimeError):
    """Base class for failures in components surrounding the assessment core."""


class FeedUnavailableError(LinkGuardError):
    """Raised when a link feed cannot produce candidate URLs."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source} feed unavailable: {reason}")
        self.source = source
        self.reason = reason
