"""
Run settings resolved from the command line.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from feed_catcher import config
from feed_catcher.validation import (
    ValidationError,
    validate_download_path,
    validate_feed_url,
)


@dataclass(frozen=True)
class CatcherSettings:
    """Validated, read-only settings for one run."""
    download_path: Path
    feed_url: str


def default_download_path() -> str:
    """Return the default download directory below the user's home."""
    return os.path.join(os.path.expanduser('~'), config.DEFAULT_DOWNLOAD_SUBDIR)


def load_settings(download_path: str, feed_url: str) -> CatcherSettings:
    """
    Resolve and validate the run settings.

    The download path is normalized and made absolute before it is checked.

    Parameters:
    download_path: Target directory as given by the user
    feed_url: Feed URL as given by the user

    Returns:
    CatcherSettings: Validated settings

    Raises:
    ValidationError: If the path or the feed URL is not usable
    """
    try:
        absolute_path = Path(os.path.abspath(os.path.normpath(os.path.expanduser(download_path))))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Cannot determine the absolute path from {download_path!r}.") from e

    is_valid, error = validate_download_path(absolute_path)
    if not is_valid:
        raise ValidationError(error)

    is_valid, error = validate_feed_url(feed_url)
    if not is_valid:
        raise ValidationError(error)

    return CatcherSettings(download_path=absolute_path, feed_url=feed_url.strip())
