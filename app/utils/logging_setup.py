from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from ``level`` or LINKGUARD_LOG_LEVEL (default INFO)."""
    name = (level or os.getenv("LINKGUARD_LOG_LEVEL") or "INFO").strip().upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
