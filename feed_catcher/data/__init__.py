"""
Feed collection modules.
"""

from feed_catcher.data.collection import FeedItem, FeedError, fetch_feed, parse_feed

__all__ = [
    'FeedItem',
    'FeedError',
    'fetch_feed',
    'parse_feed',
]
