"""Shared fixtures for feed-catcher tests."""

import logging

import pytest
import requests


@pytest.fixture(autouse=True)
def propagate_logs():
    """Let caplog see records from the feed_catcher logger."""
    logger = logging.getLogger("feed_catcher")
    previous = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = previous


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, chunks=(), status_code=200, fail_after=None, url="", error=None):
        self.chunks = list(chunks)
        self.status_code = status_code
        self.fail_after = fail_after
        self.error = error or requests.exceptions.ChunkedEncodingError("connection broken")
        self.url = url
        self.headers = {"Content-Length": str(sum(len(c) for c in self.chunks))}
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")

    def iter_content(self, chunk_size=1):
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index >= self.fail_after:
                raise self.error
            yield chunk

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


@pytest.fixture
def fake_response():
    return FakeResponse


RSS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>TekPub</title>
    <link>http://tekpub.com</link>
    <description>Screencasts</description>
{items}
  </channel>
</rss>
"""

ITEM_TEMPLATE = """    <item>
      <title>{title}</title>
      <link>{link}</link>
      <description>{description}</description>
    </item>"""


def make_rss(items):
    """Build an RSS document from (title, link) pairs."""
    return RSS_TEMPLATE.format(
        items="\n".join(
            ITEM_TEMPLATE.format(title=title, link=link, description=f"About {title}")
            for title, link in items
        )
    )


@pytest.fixture
def rss_builder():
    return make_rss
