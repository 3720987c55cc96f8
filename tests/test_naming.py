"""Tests for title sanitizing, sequence numbers and download models."""

import re

import pytest

from feed_catcher.data.collection import FeedItem
from feed_catcher.download.models import DownloadModel, ParseError, build_download_model
from feed_catcher.download.utils import clean_path, get_sequence_number, replace_whitespace

ALLOWED = re.compile(r"^[\w\s.\-#]*$")

SAMPLE_TEXTS = [
    "Mastering NHibernate 2",
    "  padded title  ",
    "C#: the good parts?",
    "a/b\\c:d*e?f\"g<h>i|j",
    "../../etc/passwd",
    "./relative//path/",
    "Über Straße — ça va!",
    "日本語のタイトル 第3話",
    "tabs\tand\nnewlines",
    "!!!",
    "",
    "   ",
    "v1.2_final-cut #3",
]


class TestCleanPath:
    """Tests for clean_path."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_only_allowed_characters(self, text):
        """Cleaned text never contains path separators or punctuation outside the allowed set."""
        assert ALLOWED.match(clean_path(text))

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, text):
        """Cleaning twice gives the same result as cleaning once."""
        once = clean_path(text)
        assert clean_path(once) == once

    def test_trims_whitespace(self):
        assert clean_path("  Mastering NHibernate 2 ") == "Mastering NHibernate 2"

    def test_keeps_hash_dot_dash_underscore(self):
        assert clean_path("v1.2_final-cut #3") == "v1.2_final-cut #3"

    def test_removes_separators_and_punctuation(self):
        assert clean_path("C#: a/b?") == "C# ab"

    def test_normalizes_relative_markers(self):
        """Redundant separators and dot segments are resolved before stripping."""
        assert clean_path("a/./b//c") == "abc"
        assert clean_path("a/x/../b") == "ab"

    def test_keeps_unicode_letters(self):
        assert clean_path("Über Straße") == "Über Straße"
        assert clean_path("日本語") == "日本語"

    def test_empty_results(self):
        assert clean_path("") == ""
        assert clean_path("   ") == ""
        assert clean_path("!?*") == ""

    @pytest.mark.parametrize("text", [".", "..", "...", " .. ", "?..", "../"])
    def test_dot_only_segments_become_empty(self, text):
        """Segments that would name the root or its parent are dropped."""
        assert clean_path(text) == ""

    def test_dots_inside_names_are_kept(self):
        assert clean_path("v1..2") == "v1..2"
        assert clean_path("...and more") == "...and more"


class TestReplaceWhitespace:
    """Tests for replace_whitespace."""

    def test_single_spaces(self):
        assert replace_whitespace("a b c") == "a-b-c"

    def test_runs_collapse_to_one_hyphen(self):
        assert replace_whitespace("a  \t b\n\nc") == "a-b-c"

    @pytest.mark.parametrize("text", ["one two", " lead", "trail ", "a \t b  c", "none"])
    def test_one_hyphen_per_run(self, text):
        """The number of hyphens added equals the number of whitespace runs."""
        result = replace_whitespace(text)
        assert not re.search(r"\s", result)
        assert result.count("-") == len(re.findall(r"\s+", text))


class TestGetSequenceNumber:
    """Tests for get_sequence_number."""

    def test_matching_link(self):
        link = "http://delivery.tekpub.com/mastering-nhibernate/77/hd/file.mp4?token=abc123"
        assert get_sequence_number(link) == (77, True)

    def test_https_and_leading_zeros(self):
        link = "https://delivery.tekpub.com/series/nh/005/hd/file.mp4?token=T0k3n"
        assert get_sequence_number(link) == (5, True)

    @pytest.mark.parametrize("link", [
        "",
        "http://example.com/series/77/hd/file.mp4?token=abc",
        "http://delivery.tekpub.com/series/77/sd/file.mp4?token=abc",
        "http://delivery.tekpub.com/series/77/hd/file.mp4",
        "http://delivery.tekpub.com/series/seven/hd/file.mp4?token=abc",
        "ftp://delivery.tekpub.com/series/77/hd/file.mp4?token=abc",
    ])
    def test_non_matching_links(self, link):
        """Links of any other shape have no sequence number."""
        assert get_sequence_number(link)[1] is False


class TestBuildDownloadModel:
    """Tests for build_download_model."""

    def test_with_sequence_number(self):
        item = FeedItem(
            title="Mastering NHibernate 2: Search",
            link="http://delivery.tekpub.com/mastering-nhibernate/5/hd/file.mp4?token=xyz",
            content="Full text search",
        )
        model = build_download_model(item)

        assert model == DownloadModel(
            title="Mastering NHibernate 2: Search",
            description="Full text search",
            folder_name="Mastering NHibernate 2",
            file_name="Mastering-NHibernate-2-005-Search.mp4",
            source_url=item.link,
        )

    def test_without_sequence_number(self):
        item = FeedItem(title="Rails 3: Getting Started", link="http://example.com/v.mp4", content="")
        model = build_download_model(item)

        assert model.folder_name == "Rails 3"
        assert model.file_name == "Rails-3-Getting-Started.mp4"
        assert model.source_url == "http://example.com/v.mp4"

    def test_splits_on_first_separator_only(self):
        item = FeedItem(title="Series: Part: Two", link="", content="")
        model = build_download_model(item)

        assert model.folder_name == "Series"
        assert model.file_name == "Series-Part-Two.mp4"

    def test_unsafe_title_characters_are_removed(self):
        item = FeedItem(title="C#/.NET: What's new?", link="", content="")
        model = build_download_model(item)

        assert "/" not in model.folder_name
        assert model.file_name.endswith(".mp4")
        assert ALLOWED.match(model.file_name)

    def test_str_is_title(self):
        item = FeedItem(title="A: B", link="", content="")
        assert str(build_download_model(item)) == "A: B"

    def test_parent_folder_title_stays_in_root(self):
        item = FeedItem(title="..: Escape", link="http://example.com/v.mp4", content="")
        model = build_download_model(item)

        assert model.folder_name == ""
        assert model.file_name == "-Escape.mp4"

    @pytest.mark.parametrize("title", ["NoColonHere", "Colon:without space", ""])
    def test_missing_separator_raises(self, title):
        item = FeedItem(title=title, link="http://example.com", content="")
        with pytest.raises(ParseError) as exc_info:
            build_download_model(item)
        assert exc_info.value.title == title
