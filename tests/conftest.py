from __future__ import annotations

import pytest

from app.deps import close_app_state


@pytest.fixture(autouse=True)
def isolated_app_state(monkeypatch):
    """Give every test a freshly built process state with no snapshot on disk."""
    monkeypatch.delenv("LINKGUARD_STORE_PATH", raising=False)
    monkeypatch.delenv("LINKGUARD_CONFIG", raising=False)
    monkeypatch.delenv("LINKGUARD_GRAPH_TOKEN", raising=False)
    close_app_state()
    yield
    close_app_state()
