"""
Feed collection: fetch an RSS/Atom feed and turn its entries into FeedItems.
"""

import traceback
from dataclasses import dataclass
from typing import List, Optional, Union

import feedparser
import requests

from feed_catcher import config
from feed_catcher.logging_config import setup_logging

logger = setup_logging(__name__)


class FeedError(Exception):
    """Raised when the feed cannot be fetched or parsed."""
    pass


@dataclass(frozen=True)
class FeedItem:
    """One feed entry, in feed document order."""
    title: str
    link: str
    content: str


def _entry_content(entry) -> str:
    """
    Return the body text of a feedparser entry.

    Prefers the first content element (content:encoded in RSS 2.0), then
    the summary/description.
    """
    contents = entry.get('content') or []
    for content in contents:
        value = content.get('value')
        if value:
            return value
    return entry.get('summary', '') or ''


def parse_feed(content: Union[bytes, str]) -> List[FeedItem]:
    """
    Parse feed content into FeedItems.

    Parameters:
    content: Raw feed document

    Returns:
    List[FeedItem]: Items in document order

    Raises:
    FeedError: If the document is malformed and yields no entries
    """
    feed = feedparser.parse(content)

    if feed.bozo and not feed.entries:
        raise FeedError(f"Unable to parse feed: {feed.get('bozo_exception')}")

    return [
        FeedItem(
            title=entry.get('title', '') or '',
            link=entry.get('link', '') or '',
            content=_entry_content(entry),
        )
        for entry in feed.entries
    ]


def fetch_feed(feed_url: str, timeout: Optional[float] = None) -> List[FeedItem]:
    """
    Download the feed once and parse it.

    Parameters:
    feed_url: URL of the feed
    timeout: Request timeout in seconds (default: config.FEED_TIMEOUT)

    Returns:
    List[FeedItem]: Items in document order

    Raises:
    FeedError: If the feed cannot be downloaded or parsed
    """
    if timeout is None:
        timeout = config.FEED_TIMEOUT

    try:
        logger.debug(f"Downloading feed: {feed_url}")
        response = requests.get(feed_url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.debug(traceback.format_exc())
        raise FeedError(f"Failed to download feed {feed_url}: {e}") from e

    items = parse_feed(response.content)
    logger.info(f"Feed {feed_url} contains {len(items)} item(s)")
    return items
