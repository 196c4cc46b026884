from .sources import DEMO_LINKS, FeedSource, GraphFeedSource, StaticFeedSource

__all__ = ["DEMO_LINKS", "FeedSource", "GraphFeedSource", "StaticFeedSource"]
