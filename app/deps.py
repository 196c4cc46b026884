from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv

from app.services.assessment_service import AssessmentService
from app.services.dashboard_service import DashboardService
from app.services.feed_service import FeedScanService
from app.services.refinement_service import RefinementService
from core.feedback.refiner import FeedbackRefiner
from core.feeds import FeedSource, GraphFeedSource, StaticFeedSource
from core.feeds.sources import GRAPH_API_URL
from storage.threatdb import ThreatRecord, ThreatStore, load_snapshot, write_snapshot

ROOT = Path(__file__).resolve().parent.parent

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _resolve_path(value: Optional[str]) -> Optional[Path]:
    if not value:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else ROOT / path


@dataclass
class AppState:
    config: Dict
    store: ThreatStore
    refiner: FeedbackRefiner
    assessments: AssessmentService
    refinements: RefinementService
    dashboard: DashboardService
    feed_scanner: FeedScanService
    feed_source: FeedSource
    persist_path: Optional[Path]


def build_feed_source(feed_cfg: Dict) -> FeedSource:
    mode = feed_cfg.get("mode", "static")
    if mode == "graph":
        graph_cfg = feed_cfg.get("graph", {}) or {}
        return GraphFeedSource(
            access_token=os.getenv("LINKGUARD_GRAPH_TOKEN", ""),
            base_url=graph_cfg.get("base_url", GRAPH_API_URL),
            timeout=float(graph_cfg.get("timeout", 10.0)),
        )
    if mode != "static":
        raise ValueError(f"Unknown feed mode: {mode!r}")
    return StaticFeedSource(
        links=feed_cfg.get("links") or None,
        sample_size=feed_cfg.get("sample_size", 2),
    )


def seed_store(store: ThreatStore, seeds: Dict[str, Dict]) -> int:
    """Insert configured demo records without overwriting existing state."""
    inserted = 0
    for url, payload in (seeds or {}).items():
        if url in store:
            continue
        store.insert_if_absent(url, ThreatRecord.from_dict(payload))
        inserted += 1
    return inserted


def build_app_state(config: Dict) -> AppState:
    store_cfg = config.get("store", {}) or {}
    persist_path = _resolve_path(os.getenv("LINKGUARD_STORE_PATH") or store_cfg.get("persist_path"))

    store = ThreatStore()
    if persist_path:
        load_snapshot(store, persist_path)
    if store_cfg.get("seed_examples", False):
        seeded = seed_store(store, store_cfg.get("seed_records", {}))
        logger.info("Seeded %d example threat records", seeded)

    refiner = FeedbackRefiner(config.get("refinement", {}) or {})
    assessments = AssessmentService(store)
    return AppState(
        config=config,
        store=store,
        refiner=refiner,
        assessments=assessments,
        refinements=RefinementService(store, refiner),
        dashboard=DashboardService(store, refiner),
        feed_scanner=FeedScanService(assessments),
        feed_source=build_feed_source(config.get("feed", {}) or {}),
        persist_path=persist_path,
    )


@lru_cache(maxsize=1)
def get_app_state() -> AppState:
    load_dotenv(ROOT / ".env")
    config_path = _resolve_path(os.getenv("LINKGUARD_CONFIG")) or ROOT / "config" / "linkguard.yaml"
    return build_app_state(_load_yaml(config_path))


def flush_app_state() -> int:
    """Persist the store snapshot when a persist path is configured."""
    state = get_app_state()
    if not state.persist_path:
        return 0
    return write_snapshot(state.store, state.persist_path)


def close_app_state() -> None:
    """Flush and discard the process state; the next access rebuilds it."""
    if get_app_state.cache_info().currsize == 0:
        return
    flush_app_state()
    get_app_state.cache_clear()


def get_store() -> ThreatStore:
    return get_app_state().store


def get_assessment_service() -> AssessmentService:
    return get_app_state().assessments


def get_refinement_service() -> RefinementService:
    return get_app_state().refinements


def get_dashboard_service() -> DashboardService:
    return get_app_state().dashboard


def get_feed_scanner() -> FeedScanService:
    return get_app_state().feed_scanner


def get_feed_source() -> FeedSource:
    return get_app_state().feed_source
