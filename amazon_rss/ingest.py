"""Build generic feeds from parsed RSS/Atom documents."""

from datetime import UTC, datetime
from typing import Any

import feedparser
from dateutil import parser as date_parser

from .logging_config import create_execution_logger
from .models import Author, Enclosure, Feed, Image, Item, Link


class FeedIngestor:
    """Normalizes feedparser results into the generic feed model."""

    def __init__(self, execution_id: str | None = None):
        """Initialize FeedIngestor.

        Args:
            execution_id: Execution ID for logging context
        """
        self.logger = create_execution_logger("ingest", execution_id)

    def parse(self, document: str | bytes) -> Feed:
        """Parse an RSS/Atom document already held in memory.

        Args:
            document: Raw feed text or bytes

        Returns:
            Generic Feed built from the document
        """
        parsed = feedparser.parse(document)
        if parsed.bozo and hasattr(parsed, "bozo_exception"):
            self.logger.warning(
                f"Feed parsing warning: {parsed.bozo_exception}",
                bozo_exception=str(parsed.bozo_exception),
            )
        return self.feed_from_parsed(parsed)

    def feed_from_parsed(self, parsed: Any) -> Feed:
        """Build a Feed from a feedparser result.

        Args:
            parsed: Object returned by ``feedparser.parse``

        Returns:
            Generic Feed with entries in document order

        Raises:
            ValueError: If the result carries no feed section
        """
        channel = parsed.get("feed")
        if channel is None:
            raise ValueError("Parsed document has no feed section")

        feed = Feed(
            title=channel.get("title", ""),
            link=Link(href=channel.get("link", "")),
            description=channel.get("subtitle") or channel.get("description", ""),
            author=self.normalize_author(channel),
            copyright=channel.get("rights", ""),
            id=channel.get("id", ""),
            subtitle=channel.get("subtitle", ""),
            created=self.parse_date(channel.get("published")),
            updated=self.parse_date(channel.get("updated")),
            image=self.normalize_image(channel.get("image")),
        )

        entries = parsed.get("entries", [])
        skipped = 0
        for entry in entries:
            try:
                feed.add(self.normalize_item(entry))
            except Exception as e:
                skipped += 1
                self.logger.warning(
                    f"Failed to normalize entry: {e}",
                    feed_title=feed.title,
                    error=str(e),
                )
                continue

        self.logger.log_metrics(
            {"entries": len(entries), "items": len(feed.items), "skipped": skipped}
        )
        return feed

    def normalize_item(self, entry: Any) -> Item:
        """Normalize one parsed entry into an Item.

        Args:
            entry: Entry mapping from feedparser

        Returns:
            Normalized Item
        """
        content = ""
        if entry.get("content"):
            content = entry["content"][0].get("value", "")

        source = None
        if entry.get("source") and entry["source"].get("href"):
            source = Link(href=entry["source"]["href"])

        return Item(
            title=entry.get("title", ""),
            link=Link(href=entry.get("link", "")),
            description=entry.get("summary") or entry.get("description", ""),
            id=entry.get("id", ""),
            content=content,
            source=source,
            author=self.normalize_author(entry),
            enclosure=self.normalize_enclosure(entry.get("enclosures")),
            created=self.parse_date(entry.get("published")),
            updated=self.parse_date(entry.get("updated")),
        )

    @staticmethod
    def normalize_author(section: Any) -> Author | None:
        """Extract the author of a feed or entry, if any."""
        detail = section.get("author_detail")
        if detail:
            return Author(name=detail.get("name", ""), email=detail.get("email", ""))
        if section.get("author"):
            return Author(name=section["author"])
        return None

    @staticmethod
    def normalize_enclosure(enclosures: Any) -> Enclosure | None:
        """Take the first enclosure; feedparser reports the URL as ``href``."""
        if not enclosures:
            return None
        first = enclosures[0]
        return Enclosure(
            url=first.get("href", ""),
            length=str(first.get("length", "")),
            type=first.get("type", ""),
        )

    def normalize_image(self, image: Any) -> Image | None:
        """Copy the channel image, if any."""
        if not image:
            return None
        return Image(
            url=image.get("href", ""),
            title=image.get("title", ""),
            link=image.get("link", ""),
            width=self.parse_size(image.get("width")),
            height=self.parse_size(image.get("height")),
        )

    def parse_size(self, value: Any) -> int:
        """Parse an image dimension; unusable values become 0.

        Args:
            value: Dimension as found in the document

        Returns:
            The dimension in pixels, or 0 when absent or unparseable
        """
        if not value:
            return 0
        try:
            return int(value)
        except (ValueError, TypeError) as e:
            self.logger.warning(f"Unparseable image size {value!r}: {e}", error=str(e))
            return 0

    def parse_date(self, value: str | None) -> datetime | None:
        """Parse a feed date string; naive results are taken as UTC.

        Args:
            value: Date text as found in the document

        Returns:
            Timezone-aware datetime, or None when absent or unparseable
        """
        if not value:
            return None
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError) as e:
            self.logger.warning(f"Unparseable date {value!r}: {e}", error=str(e))
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed


def feed_from_parsed(parsed: Any, execution_id: str | None = None) -> Feed:
    """Build a Feed from a feedparser result."""
    return FeedIngestor(execution_id).feed_from_parsed(parsed)
