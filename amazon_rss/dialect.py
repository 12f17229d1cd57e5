"""Amazon flavoured RSS 2.0 dialect.

Maps the generic feed model onto the channel and item structures expected by
Amazon's publishing ingestion, which extends RSS 2.0 with the ``amzn``
namespace. Field layout follows http://cyber.law.harvard.edu/rss/rss.html.
"""

from dataclasses import dataclass

from .dates import RFC1123Z, any_time_format
from .envelope import AmazonRssEnvelope, wrap
from .logging_config import create_execution_logger
from .models import Feed, Item

# Fixed authoring hints injected into every item for editors to replace.
HERO_IMAGE_PLACEHOLDER = "POST THUMBNAIL (Prefer 2x1 at least 1000px wide)"
INTRO_TEXT_PLACEHOLDER = "META DESCRIPTION"
INDEX_CONTENT_FLAG = "True"

AMZN_RSS_VERSION = 1.0


@dataclass(frozen=True)
class RssContent:
    """Full item body, rendered as ``content:encoded``."""

    content: str


@dataclass(frozen=True)
class RssEnclosure:
    """Media attachment, rendered as attributes of ``enclosure``."""

    url: str
    length: str
    type: str


@dataclass(frozen=True)
class RssImage:
    """Channel image."""

    url: str
    title: str
    link: str
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class RssTextInput:
    """Channel text input box."""

    title: str
    description: str
    name: str
    link: str


@dataclass(frozen=True)
class AmazonProduct:
    """A product slide inside an Amazon item."""

    url: str
    headline: str
    award: str
    summary: str


@dataclass(frozen=True)
class AmazonRssItem:
    """Item with the Amazon specific elements."""

    title: str
    link: str
    description: str
    content: RssContent | None = None
    author: str = ""
    category: str = ""
    comments: str = ""
    enclosure: RssEnclosure | None = None
    guid: str = ""
    pub_date: str = ""
    source: str = ""
    creator: str = ""
    hero_image: str = ""
    intro_text: str = ""
    index_content: str = ""
    products: tuple[AmazonProduct, ...] = ()


@dataclass(frozen=True)
class AmazonRssChannel:
    """Channel with the Amazon specific elements."""

    title: str
    link: str
    description: str
    language: str = ""
    copyright: str = ""
    managing_editor: str = ""
    web_master: str = ""
    pub_date: str = ""
    last_build_date: str = ""
    category: str = ""
    generator: str = ""
    docs: str = ""
    cloud: str = ""
    ttl: int = 0
    rating: str = ""
    skip_hours: str = ""
    skip_days: str = ""
    amzn_rss_version: float = 0.0
    image: RssImage | None = None
    text_input: RssTextInput | None = None
    items: tuple[AmazonRssItem, ...] = ()

    def feed_xml(self) -> AmazonRssEnvelope:
        """Wrap this channel in the ``<rss>`` envelope."""
        return wrap(self)


def new_amazon_rss_item(item: Item) -> AmazonRssItem:
    """Build an Amazon RSS item from a generic item.

    Args:
        item: Generic feed item

    Returns:
        The dialect item, carrying the fixed vendor placeholders
    """
    content = None
    if len(item.content) > 0:
        content = RssContent(content=item.content)

    enclosure = None
    source_enclosure = item.enclosure
    if (
        source_enclosure is not None
        and source_enclosure.type != ""
        and source_enclosure.length != ""
    ):
        enclosure = RssEnclosure(
            url=source_enclosure.url,
            length=source_enclosure.length,
            type=source_enclosure.type,
        )

    return AmazonRssItem(
        title=item.title,
        link=item.link.href,
        description=item.description,
        content=content,
        # Bare name; the channel's managingEditor uses the long form.
        author=item.author.name if item.author is not None else "",
        enclosure=enclosure,
        guid=item.id,
        pub_date=any_time_format(RFC1123Z, item.created, item.updated),
        source=item.source.href if item.source is not None else "",
        hero_image=HERO_IMAGE_PLACEHOLDER,
        intro_text=INTRO_TEXT_PLACEHOLDER,
        index_content=INDEX_CONTENT_FLAG,
        products=(),
    )


def format_managing_editor(feed: Feed) -> str:
    """Return ``email`` or ``email (name)`` for the feed author, if any."""
    if feed.author is None:
        return ""
    if len(feed.author.name) > 0:
        return f"{feed.author.email} ({feed.author.name})"
    return feed.author.email


class AmazonRss:
    """Adapter from a generic Feed to the Amazon RSS dialect."""

    def __init__(self, feed: Feed, execution_id: str | None = None):
        """Initialize the adapter.

        Args:
            feed: Generic feed to map; it is never modified
            execution_id: Execution ID for logging context
        """
        self.feed = feed
        self.logger = create_execution_logger("dialect", execution_id)

    def channel(self) -> AmazonRssChannel:
        """Map the feed to an Amazon RSS channel.

        pubDate falls back from created to updated, while lastBuildDate only
        ever reflects updated.

        Returns:
            A freshly built channel with items in input order
        """
        feed = self.feed
        pub = any_time_format(RFC1123Z, feed.created, feed.updated)
        build = any_time_format(RFC1123Z, feed.updated)

        image = None
        if feed.image is not None:
            image = RssImage(
                url=feed.image.url,
                title=feed.image.title,
                link=feed.image.link,
                width=feed.image.width,
                height=feed.image.height,
            )

        items = tuple(new_amazon_rss_item(item) for item in feed.items)
        self.logger.log_channel_mapping(feed.title, len(items))

        return AmazonRssChannel(
            title=feed.title,
            link=feed.link.href,
            description=feed.description,
            copyright=feed.copyright,
            managing_editor=format_managing_editor(feed),
            pub_date=pub,
            last_build_date=build,
            amzn_rss_version=AMZN_RSS_VERSION,
            image=image,
            items=items,
        )

    def feed_xml(self) -> AmazonRssEnvelope:
        """Return the serializable envelope for the feed."""
        return self.channel().feed_xml()
