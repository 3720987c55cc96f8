"""
Download operations modules.
"""

from feed_catcher.download.utils import clean_path, replace_whitespace, get_sequence_number
from feed_catcher.download.models import DownloadModel, ParseError, build_download_model
from feed_catcher.download.downloader import download

__all__ = [
    'clean_path',
    'replace_whitespace',
    'get_sequence_number',
    'DownloadModel',
    'ParseError',
    'build_download_model',
    'download',
]
