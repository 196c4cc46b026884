"""Threat record storage used by the LinkGuard services."""

from .dao import ThreatStore
from .models import ThreatRecord
from .snapshot import load_snapshot, write_snapshot

__all__ = ["ThreatStore", "ThreatRecord", "load_snapshot", "write_snapshot"]
