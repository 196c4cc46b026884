"""Link feed collaborators that supply candidate URLs as plain strings."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Protocol, Sequence

import httpx

from core.errors import FeedUnavailableError

logger = logging.getLogger(__name__)

GRAPH_API_URL = "https://graph.facebook.com/v19.0"

DEMO_LINKS: List[str] = [
    "https://example.com/potential-phishing-site",
    "https://trusted-news-source.com/article/123",
    "https://suspicious-download.net/free-software",
    "https://legitimate-business.com/products",
    "https://known-malware-distributor.com/download",
]


class FeedSource(Protocol):
    name: str

    def fetch_links(self) -> List[str]:
        ...


class StaticFeedSource:
    """Returns a random subset of a fixed link list, simulating a live feed."""

    name = "static"

    def __init__(
        self,
        links: Optional[Sequence[str]] = None,
        sample_size: Optional[int] = 2,
        rng: Optional[random.Random] = None,
    ):
        self.links = list(links if links is not None else DEMO_LINKS)
        self.sample_size = sample_size
        self.rng = rng or random.Random()

    def fetch_links(self) -> List[str]:
        if self.sample_size is None or self.sample_size >= len(self.links):
            return list(self.links)
        return self.rng.sample(self.links, self.sample_size)


class GraphFeedSource:
    """Reads the ``link`` field of posts in the authenticated user's Graph API feed."""

    name = "graph"

    def __init__(
        self,
        access_token: str,
        base_url: str = GRAPH_API_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def fetch_links(self) -> List[str]:
        if not self.access_token:
            raise FeedUnavailableError(self.name, "no access token configured")
        params = {"fields": "link", "access_token": self.access_token}
        url = f"{self.base_url}/me/feed"
        try:
            if self._client is not None:
                response = self._client.get(url, params=params, timeout=self.timeout)
            else:
                response = httpx.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise FeedUnavailableError(self.name, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FeedUnavailableError(self.name, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise FeedUnavailableError(self.name, "response was not valid JSON") from exc

        posts = payload.get("data", []) if isinstance(payload, dict) else []
        links = [post["link"] for post in posts if isinstance(post, dict) and post.get("link")]
        logger.info("Fetched %d links from %s feed", len(links), self.name)
        return links
