"""Thread-safe in-memory store holding one ThreatRecord per URL."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable, Dict, Iterator, Optional

from .models import ThreatRecord


class ThreatStore:
    """Mapping of URL -> ThreatRecord with per-key atomic updates.

    Committed records are never modified in place: writers build a new
    record and swap it into the table, so readers can copy without locking.
    """

    def __init__(self) -> None:
        self._records: Dict[str, ThreatRecord] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, url: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._key_locks.get(url)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[url] = lock
            return lock

    def get(self, url: str) -> Optional[ThreatRecord]:
        """Return a copy of the record for ``url`` or None when never assessed."""
        record = self._records.get(url)
        return replace(record) if record is not None else None

    def put(self, url: str, record: ThreatRecord) -> None:
        """Insert or overwrite the record for ``url`` wholesale."""
        with self._lock_for(url):
            self._records[url] = replace(record)

    def insert_if_absent(self, url: str, record: ThreatRecord) -> ThreatRecord:
        """Store ``record`` unless ``url`` already has one; return the stored copy."""
        with self._lock_for(url):
            current = self._records.get(url)
            if current is None:
                current = replace(record)
                self._records[url] = current
            return replace(current)

    def mutate(self, url: str, fn: Callable[[ThreatRecord], object]) -> bool:
        """Apply ``fn`` to a working copy of the record and commit it atomically.

        Returns False without touching anything when ``url`` is unknown.
        """
        if url not in self._records:
            return False
        with self._lock_for(url):
            current = self._records.get(url)
            if current is None:
                return False
            working = replace(current)
            fn(working)
            # replace() re-runs record validation before the commit.
            self._records[url] = replace(working)
            return True

    def records(self) -> Dict[str, ThreatRecord]:
        """Return a point-in-time copy of every record."""
        snapshot = dict(self._records)
        return {url: replace(record) for url, record in snapshot.items()}

    def __contains__(self, url: object) -> bool:
        return url in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._records))
