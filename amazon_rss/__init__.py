"""Amazon flavoured RSS 2.0 generation from a generic feed model."""

from .dialect import AmazonRss, AmazonRssChannel, AmazonRssItem, new_amazon_rss_item
from .envelope import AmazonRssEnvelope, wrap
from .models import Author, Enclosure, Feed, Image, Item, Link
from .serializer import to_bytes, to_xml, write_xml

__all__ = [
    "AmazonRss",
    "AmazonRssChannel",
    "AmazonRssEnvelope",
    "AmazonRssItem",
    "Author",
    "Enclosure",
    "Feed",
    "Image",
    "Item",
    "Link",
    "new_amazon_rss_item",
    "to_bytes",
    "to_xml",
    "wrap",
    "write_xml",
]
