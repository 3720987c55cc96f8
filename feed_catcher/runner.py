"""
Feed runner: fetch the feed and download its items one after another.
"""

from dataclasses import dataclass
from typing import Callable, List

from feed_catcher import config
from feed_catcher.cancellation import StopToken
from feed_catcher.data.collection import FeedItem, fetch_feed
from feed_catcher.download.downloader import download
from feed_catcher.download.models import ParseError, build_download_model
from feed_catcher.logging_config import setup_logging
from feed_catcher.settings import CatcherSettings

logger = setup_logging(__name__)


@dataclass
class RunSummary:
    """Counts for one run."""
    downloaded: int = 0
    existing: int = 0
    failed: int = 0
    unparsed: int = 0
    stopped: bool = False

    @property
    def processed(self) -> int:
        return self.downloaded + self.existing + self.failed + self.unparsed


def run(
    settings: CatcherSettings,
    stop_token: StopToken,
    fetch: Callable[[str], List[FeedItem]] = fetch_feed,
    fetch_one: Callable = download
) -> RunSummary:
    """
    Download every item of the configured feed.

    Items are handled strictly in feed order, one at a time. The stop
    token is checked after each item, so a stop request never interrupts
    a download in progress.

    Parameters:
    settings: Validated settings
    stop_token: Token set by the stop listener
    fetch: Feed fetcher (default: fetch_feed)
    fetch_one: Item downloader (default: download)

    Returns:
    RunSummary: Counts of the run

    Raises:
    FeedError: If the feed cannot be fetched
    """
    logger.info(f"Fetching feed {settings.feed_url!r}")
    items = fetch(settings.feed_url)

    summary = RunSummary()

    logger.info(f"Downloading to folder {str(settings.download_path)!r}.")
    for item in items:
        try:
            model = build_download_model(item)
        except ParseError as e:
            logger.warning(f"Unable to parse item {item.title!r}. {e}")
            summary.unparsed += 1
        else:
            status = fetch_one(model, settings.download_path)
            if status == config.DOWNLOAD_STATUS_DOWNLOADED:
                summary.downloaded += 1
            elif status == config.DOWNLOAD_STATUS_EXISTS:
                summary.existing += 1
            else:
                summary.failed += 1

        if stop_token.stop_requested():
            logger.info("Download process stopped.")
            summary.stopped = True
            break

    logger.info(
        f"Processed {summary.processed} of {len(items)} item(s): "
        f"{summary.downloaded} downloaded, {summary.existing} already present, "
        f"{summary.failed} failed, {summary.unparsed} unparsable"
    )
    return summary
