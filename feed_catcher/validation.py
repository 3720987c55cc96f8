"""
Input validation utilities for feed-catcher.

This module validates the download directory and feed URL given on the
command line before any network or filesystem work begins.
"""

from pathlib import Path
from urllib.parse import urlparse
from typing import Tuple, Optional

from feed_catcher import config


# Validation constants
MAX_URL_LENGTH = 2048
ALLOWED_URL_SCHEMES = ('http', 'https')


class ValidationError(Exception):
    """Raised when input validation fails."""
    pass


def validate_feed_url(url: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a feed URL.

    The URL must be set, must not be the placeholder default and must use
    an http(s) scheme with a host.

    Parameters:
    url: str - URL to validate

    Returns:
    Tuple[bool, Optional[str]]: (is_valid, error_message)

    Example:
        >>> validate_feed_url("https://example.com/feed.xml")
        (True, None)
    """
    if not isinstance(url, str) or not url.strip():
        return False, "Please specify a feed url."

    if url.strip() == config.DEFAULT_FEED_URL:
        return False, "Please specify a feed url."

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL exceeds maximum length of {MAX_URL_LENGTH} characters"

    parsed = urlparse(url.strip())

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES:
        return False, f"URL scheme must be one of {ALLOWED_URL_SCHEMES}, got '{parsed.scheme}'"

    if not parsed.netloc:
        return False, "URL must include a domain name"

    return True, None


def validate_download_path(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Validate that the download path is an existing directory.

    Parameters:
    path: Path - Absolute download path

    Returns:
    Tuple[bool, Optional[str]]: (is_valid, error_message)
    """
    if not path.exists():
        return False, f"The directory {str(path)!r} does not exist."

    if not path.is_dir():
        return False, f"The path {str(path)!r} is no directory."

    return True, None
