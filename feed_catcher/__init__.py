"""
feed-catcher - Download the videos of an RSS feed.

This package provides functionality to:
- Fetch an RSS feed and read its items in feed order
- Derive a folder and file name from each item's title and link
- Download each item's video, skipping files that already exist
- Stop after the current item when the user types "stop"
"""

__version__ = '0.1.0'

from feed_catcher import config

from feed_catcher.data.collection import FeedItem, FeedError, fetch_feed, parse_feed
from feed_catcher.download.utils import clean_path, replace_whitespace, get_sequence_number
from feed_catcher.download.models import DownloadModel, ParseError, build_download_model
from feed_catcher.download.downloader import download
from feed_catcher.cancellation import StopToken, StopListener
from feed_catcher.settings import CatcherSettings, load_settings
from feed_catcher.runner import RunSummary, run
from feed_catcher.validation import validate_feed_url, validate_download_path, ValidationError
from feed_catcher.logging_config import setup_logging, configure_logging

__all__ = [
    # Config
    'config',
    # Feed
    'FeedItem',
    'FeedError',
    'fetch_feed',
    'parse_feed',
    # Naming
    'clean_path',
    'replace_whitespace',
    'get_sequence_number',
    'DownloadModel',
    'ParseError',
    'build_download_model',
    # Download
    'download',
    'StopToken',
    'StopListener',
    'CatcherSettings',
    'load_settings',
    'RunSummary',
    'run',
    # Validation
    'validate_feed_url',
    'validate_download_path',
    'ValidationError',
    # Logging
    'setup_logging',
    'configure_logging',
]
