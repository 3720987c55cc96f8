"""
Configuration constants for feed-catcher.
"""

import re

VERSION = '0.1.0'

# Feed Configuration
DEFAULT_FEED_URL = 'http://delivery.tekpub.com/account/itunes.xml?token=123'
FEED_TIMEOUT = 30

# Download Configuration
DEFAULT_DOWNLOAD_SUBDIR = 'Videos/TekPub'
CHUNK_SIZE = 4096
DOWNLOAD_TIMEOUT = (10, 60)  # (connect, read) seconds passed to requests
SHOW_PROGRESS = True

# Naming Configuration
TITLE_SEPARATOR = ': '
FILE_EXTENSION = '.mp4'
SEQUENCE_NUMBER_PATTERN = re.compile(
    r'https?://delivery\.tekpub\.com/.+[^/]+/(\d+)/hd/file\.mp4\?token=[\w\d]+'
)
INVALID_PATH_CHARACTERS = re.compile(r'[^\w\s.\-#]')
WHITESPACE_PATTERN = re.compile(r'\s+')

# Stop Listener Configuration
STOP_COMMAND = 'stop'
LISTENER_ERROR_DELAY = 1.0  # Seconds to wait after a failed console read
LISTENER_JOIN_TIMEOUT = 1.0

# Logging Configuration
LOG_LEVEL = 'INFO'  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FILE = None  # Default for --log-file; None logs to the console only

# Download Status Constants
DOWNLOAD_STATUS_DOWNLOADED = 'downloaded'
DOWNLOAD_STATUS_EXISTS = 'exists'
DOWNLOAD_STATUS_FAILED = 'failed'
