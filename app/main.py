from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.deps import close_app_state, get_app_state
from app.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Own the threat store for the lifetime of the server process."""
    configure_logging()
    state = get_app_state()
    logger.info("LinkGuard API started with %d threat records", len(state.store))
    yield
    close_app_state()
    logger.info("LinkGuard API stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="LinkGuard API", version="0.1.0", lifespan=lifespan)

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    from app.routes import assess, feed, feedback, records  # noqa: WPS433

    app.include_router(assess.router)
    app.include_router(feedback.router)
    app.include_router(records.router)
    app.include_router(feed.router)
    return app


app = create_app()
