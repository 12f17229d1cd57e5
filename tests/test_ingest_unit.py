"""Unit tests for building feeds from parsed RSS documents."""

from datetime import UTC, datetime

import feedparser
import pytest

from amazon_rss.ingest import FeedIngestor, feed_from_parsed
from amazon_rss.models import Author, Enclosure, Link

SAMPLE_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Example</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    <copyright>2024 Example</copyright>
    <managingEditor>editor@example.com (Jane Doe)</managingEditor>
    <pubDate>Mon, 01 Jan 2024 10:00:00 +0000</pubDate>
    <lastBuildDate>Tue, 02 Jan 2024 10:00:00 +0000</lastBuildDate>
    <image>
      <url>https://example.com/logo.png</url>
      <title>Example</title>
      <link>https://example.com/</link>
      <width>88</width>
      <height>31</height>
    </image>
    <item>
      <title>First</title>
      <link>https://example.com/1</link>
      <description>One</description>
      <content:encoded><![CDATA[<p>Body</p>]]></content:encoded>
      <guid>https://example.com/1</guid>
      <pubDate>Mon, 01 Jan 2024 10:00:00 +0000</pubDate>
      <enclosure url="https://example.com/1.mp3" length="1234" type="audio/mpeg"/>
      <source url="https://other.example.com/feed">Other</source>
    </item>
    <item>
      <title>Second</title>
      <link>https://example.com/2</link>
      <description>Two</description>
    </item>
  </channel>
</rss>
"""


class TestFeedIngestorUnit:
    """Unit tests for FeedIngestor."""

    def test_channel_fields(self):
        """Channel level fields are read from the parsed document."""
        feed = FeedIngestor().parse(SAMPLE_RSS.encode("utf-8"))

        assert feed.title == "Example"
        assert feed.link == Link(href="https://example.com/")
        assert feed.description == "Example feed"
        assert feed.copyright == "2024 Example"
        assert feed.author is not None
        assert feed.author.email == "editor@example.com"
        assert feed.created == datetime(2024, 1, 1, 10, 0, 0, tzinfo=UTC)
        assert feed.updated == datetime(2024, 1, 2, 10, 0, 0, tzinfo=UTC)
        assert feed.image is not None
        assert feed.image.url == "https://example.com/logo.png"
        assert feed.image.width == 88
        assert feed.image.height == 31

    def test_item_fields(self):
        """Entry fields are read, and absent ones stay empty."""
        feed = FeedIngestor().parse(SAMPLE_RSS.encode("utf-8"))

        assert [item.title for item in feed.items] == ["First", "Second"]
        first, second = feed.items
        assert first.link == Link(href="https://example.com/1")
        assert first.description == "One"
        assert first.id == "https://example.com/1"
        assert "Body" in first.content
        assert first.enclosure == Enclosure(
            url="https://example.com/1.mp3", length="1234", type="audio/mpeg"
        )
        assert first.source == Link(href="https://other.example.com/feed")
        assert first.created == datetime(2024, 1, 1, 10, 0, 0, tzinfo=UTC)

        assert second.content == ""
        assert second.enclosure is None
        assert second.source is None
        assert second.created is None

    def test_republish_as_amazon_rss(self):
        """An ingested feed renders as an Amazon RSS document."""
        feed = FeedIngestor().parse(SAMPLE_RSS.encode("utf-8"))

        document = feed.to_amazon_rss()

        assert "<amzn:heroImage>" in document
        assert "<lastBuildDate>Tue, 02 Jan 2024 10:00:00 +0000</lastBuildDate>" in document
        assert document.count("<item>") == 2

    def test_missing_feed_section_rejected(self):
        """A result without a feed section raises ValueError."""
        with pytest.raises(ValueError, match="no feed section"):
            feed_from_parsed({"entries": []})

    def test_broken_entries_are_skipped(self):
        """Entries that cannot be normalized are skipped."""
        parsed = {
            "feed": {"title": "T", "link": "http://x"},
            "entries": [
                "not an entry",
                {"title": "Kept", "link": "http://x/1"},
            ],
        }

        feed = feed_from_parsed(parsed)

        assert [item.title for item in feed.items] == ["Kept"]

    def test_author_without_detail(self):
        """A plain author string becomes an author name."""
        assert FeedIngestor.normalize_author({"author": "Jane"}) == Author(name="Jane")
        assert FeedIngestor.normalize_author({}) is None

    def test_unparseable_date_is_absent(self):
        """Bad or empty dates are absent, naive ones become UTC."""
        ingestor = FeedIngestor()

        assert ingestor.parse_date("garbage") is None
        assert ingestor.parse_date("") is None
        assert ingestor.parse_date("2024-01-01T10:00:00") == datetime(
            2024, 1, 1, 10, 0, 0, tzinfo=UTC
        )

    def test_accepts_feedparser_result(self):
        """A feedparser result can be passed in directly."""
        parsed = feedparser.parse(SAMPLE_RSS.encode("utf-8"))

        feed = FeedIngestor(execution_id="exec_test").feed_from_parsed(parsed)

        assert len(feed.items) == 2

    def test_unparseable_image_size_becomes_zero(self):
        """A bad image dimension becomes 0 without dropping the feed."""
        parsed = {
            "feed": {
                "title": "T",
                "link": "http://x",
                "image": {"href": "http://x/logo.png", "width": "88px", "height": "31"},
            },
            "entries": [{"title": "Kept", "link": "http://x/1"}],
        }

        feed = feed_from_parsed(parsed)

        assert feed.image.url == "http://x/logo.png"
        assert feed.image.width == 0
        assert feed.image.height == 31
        assert [item.title for item in feed.items] == ["Kept"]

    def test_parse_size(self):
        """Missing or non-numeric sizes become 0."""
        ingestor = FeedIngestor()

        assert ingestor.parse_size("120") == 120
        assert ingestor.parse_size(None) == 0
        assert ingestor.parse_size("") == 0
        assert ingestor.parse_size(["88"]) == 0
