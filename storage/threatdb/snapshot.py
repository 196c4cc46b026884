"""JSON snapshot helpers used by the process lifecycle to persist a ThreatStore."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .dao import ThreatStore
from .models import ThreatRecord

logger = logging.getLogger(__name__)


def write_snapshot(store: ThreatStore, path: Path) -> int:
    """Write every record to ``path``; returns the number of records written."""
    records = store.records()
    payload = {"records": {url: record.to_dict() for url, record in records.items()}}
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(path)
    logger.info("Wrote %d threat records to %s", len(records), path)
    return len(records)


def load_snapshot(store: ThreatStore, path: Path) -> int:
    """Populate ``store`` from ``path``; missing or unreadable snapshots load nothing."""
    if not path.exists():
        return 0
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        entries = payload.get("records", {})
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring unreadable threat snapshot %s: %s", path, exc)
        return 0
    if not isinstance(entries, dict):
        logger.warning("Ignoring threat snapshot %s: 'records' is not a mapping", path)
        return 0

    loaded = 0
    for url, item in entries.items():
        try:
            record = ThreatRecord.from_dict(item)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping invalid snapshot record for %s: %s", url, exc)
            continue
        store.put(url, record)
        loaded += 1
    logger.info("Loaded %d threat records from %s", loaded, path)
    return loaded
