"""
Translation of feed items into download models.
"""

from dataclasses import dataclass

from feed_catcher import config
from feed_catcher.data.collection import FeedItem
from feed_catcher.download.utils import clean_path, get_sequence_number, replace_whitespace


class ParseError(ValueError):
    """Raised when an item title does not have the expected format."""

    def __init__(self, title: str):
        super().__init__(f"The title format is invalid: {title!r}")
        self.title = title


@dataclass(frozen=True)
class DownloadModel:
    """Where and from where one feed item is downloaded."""
    title: str
    description: str
    folder_name: str
    file_name: str
    source_url: str

    def __str__(self) -> str:
        return self.title


def build_download_model(item: FeedItem) -> DownloadModel:
    """
    Build the download model for a feed item.

    Titles are expected to look like "Mastering NHibernate 2: Search". The
    part before the first ": " names the folder, the rest names the file.
    If the link carries a sequence number it is added zero-padded after the
    folder name, and all whitespace in the file name becomes hyphens:
    "Mastering-NHibernate-2-005-Search.mp4".

    Parameters:
    item: Feed item

    Returns:
    DownloadModel: The model for the item

    Raises:
    ParseError: If the title does not contain the separator
    """
    title = item.title

    separator_position = title.find(config.TITLE_SEPARATOR)
    if separator_position == -1:
        raise ParseError(title)

    folder_name = clean_path(title[:separator_position])
    file_name = clean_path(title[separator_position + len(config.TITLE_SEPARATOR):]) + config.FILE_EXTENSION

    sequence_number, found = get_sequence_number(item.link)
    if found:
        file_name = f"{folder_name} {sequence_number:03d} {file_name}"
    else:
        file_name = f"{folder_name} {file_name}"

    return DownloadModel(
        title=title,
        description=item.content,
        folder_name=folder_name,
        file_name=replace_whitespace(file_name),
        source_url=item.link,
    )
