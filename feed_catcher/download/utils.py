"""
Naming helpers: path sanitizing and sequence number extraction.
"""

import os
from typing import Tuple

from feed_catcher import config


def clean_path(dirty_path: str) -> str:
    """
    Turn arbitrary text into a safe relative path segment.

    Surrounding whitespace is trimmed, the text is normalized with
    os.path.normpath and every character outside letters, digits,
    whitespace, '.', '-', '_' and '#' is removed. A result made of dots only
    becomes empty.

    Parameters:
    dirty_path: Text to clean, e.g. part of an item title

    Returns:
    Cleaned segment, possibly empty

    Example:
        >>> clean_path("  Mastering NHibernate 2 ")
        'Mastering NHibernate 2'
        >>> clean_path("C#: a/b?")
        'C# ab'
    """
    cleaned_path = dirty_path.strip()
    if not cleaned_path:
        return ''
    cleaned_path = os.path.normpath(cleaned_path)
    cleaned_path = config.INVALID_PATH_CHARACTERS.sub('', cleaned_path)
    # Removed characters may expose whitespace at the edges
    cleaned_path = cleaned_path.strip()
    # "." and ".." would point at the root or its parent
    if not cleaned_path.strip('.'):
        return ''
    return cleaned_path


def replace_whitespace(path_with_whitespace: str) -> str:
    """Replace every run of whitespace with a single hyphen."""
    return config.WHITESPACE_PATTERN.sub('-', path_with_whitespace)


def get_sequence_number(link: str) -> Tuple[int, bool]:
    """
    Extract the episode sequence number from a delivery download link.

    Only links shaped like
    http(s)://delivery.tekpub.com/<path>/<digits>/hd/file.mp4?token=<token>
    carry a sequence number.

    Parameters:
    link: Item link

    Returns:
    Tuple[int, bool]: (sequence_number, found); the number is 0 when not found

    Example:
        >>> get_sequence_number("http://delivery.tekpub.com/nh/77/hd/file.mp4?token=abc123")
        (77, True)
    """
    match = config.SEQUENCE_NUMBER_PATTERN.search(link or '')
    if not match:
        return 0, False

    try:
        return int(match.group(1)), True
    except ValueError:
        return 0, False
