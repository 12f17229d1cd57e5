"""Source-agnostic feed model consumed by the Amazon RSS dialect."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Link:
    """A hyperlink; only ``href`` is used by the RSS dialect."""

    href: str
    rel: str = ""
    type: str = ""
    length: str = ""


@dataclass
class Author:
    """Represents the author of a feed or an item."""

    name: str = ""
    email: str = ""


@dataclass
class Enclosure:
    """A media attachment. Length is kept as text, as RSS carries it."""

    url: str = ""
    length: str = ""
    type: str = ""


@dataclass
class Image:
    """Feed-level image."""

    url: str = ""
    title: str = ""
    link: str = ""
    width: int = 0
    height: int = 0


@dataclass
class Item:
    """Represents a single entry of a feed."""

    title: str
    link: Link | None
    description: str = ""
    id: str = ""
    content: str = ""
    source: Link | None = None
    author: Author | None = None
    enclosure: Enclosure | None = None
    created: datetime | None = None
    updated: datetime | None = None


@dataclass
class Feed:
    """Represents a whole feed with its ordered items.

    Title, link and description are required by convention; they are not
    re-validated when the feed is rendered.
    """

    title: str
    link: Link | None
    description: str = ""
    author: Author | None = None
    copyright: str = ""
    id: str = ""
    subtitle: str = ""
    created: datetime | None = None
    updated: datetime | None = None
    image: Image | None = None
    items: list[Item] = field(default_factory=list)

    def add(self, item: Item) -> None:
        """Append an item, keeping insertion order."""
        self.items.append(item)

    def to_amazon_rss(self) -> str:
        """Render this feed as an Amazon RSS document."""
        # Imported here: the dialect module depends on this one.
        from .dialect import AmazonRss
        from .serializer import to_xml

        return to_xml(AmazonRss(self).feed_xml())
