"""XML serialization of the Amazon RSS envelope.

Every dialect type has a static schema: an ordered table binding each
dataclass attribute to its serialized name, whether it becomes a child
element, an attribute, the element text or nested structures, and whether it
is dropped when it holds its zero value. Element and attribute names carry
their namespace prefixes verbatim (``amzn:heroImage``, ``xmlns:dc``) since
feed readers match on them literally.
"""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, BinaryIO

from .config import Config, SerializerConfig
from .dialect import (
    AmazonProduct,
    AmazonRssChannel,
    AmazonRssItem,
    RssContent,
    RssEnclosure,
    RssImage,
    RssTextInput,
)
from .envelope import AmazonRssEnvelope
from .logging_config import create_execution_logger

ELEMENT = "element"
ATTRIBUTE = "attribute"
TEXT = "text"
CHILD = "child"
CHILDREN = "children"

# Anything outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


@dataclass(frozen=True)
class XmlField:
    """Binding of one dataclass attribute to its serialized form."""

    attr: str
    name: str = ""
    kind: str = ELEMENT
    omitempty: bool = False


@dataclass(frozen=True)
class XmlSchema:
    """Element name and ordered field bindings for one type."""

    tag: str
    fields: tuple[XmlField, ...]


SCHEMAS: dict[type, XmlSchema] = {
    AmazonRssEnvelope: XmlSchema(
        "rss",
        (
            XmlField("version", "version", ATTRIBUTE),
            XmlField("content_namespace", "xmlns:content", ATTRIBUTE),
            XmlField("dublin_core_namespace", "xmlns:dc", ATTRIBUTE),
            XmlField("amazon_namespace", "xmlns:amzn", ATTRIBUTE),
            XmlField("channel", kind=CHILD),
        ),
    ),
    AmazonRssChannel: XmlSchema(
        "channel",
        (
            XmlField("title", "title"),
            XmlField("link", "link"),
            XmlField("description", "description"),
            XmlField("language", "language", omitempty=True),
            XmlField("copyright", "copyright", omitempty=True),
            XmlField("managing_editor", "managingEditor", omitempty=True),
            XmlField("web_master", "webMaster", omitempty=True),
            XmlField("pub_date", "pubDate", omitempty=True),
            XmlField("last_build_date", "lastBuildDate", omitempty=True),
            XmlField("category", "category", omitempty=True),
            XmlField("generator", "generator", omitempty=True),
            XmlField("docs", "docs", omitempty=True),
            XmlField("cloud", "cloud", omitempty=True),
            XmlField("ttl", "ttl", omitempty=True),
            XmlField("rating", "rating", omitempty=True),
            XmlField("skip_hours", "skipHours", omitempty=True),
            XmlField("skip_days", "skipDays", omitempty=True),
            XmlField("amzn_rss_version", "amzn:rssVersion", omitempty=True),
            XmlField("image", kind=CHILD),
            XmlField("text_input", kind=CHILD),
            XmlField("items", kind=CHILDREN),
        ),
    ),
    AmazonRssItem: XmlSchema(
        "item",
        (
            XmlField("title", "title"),
            XmlField("link", "link"),
            XmlField("description", "description"),
            XmlField("content", kind=CHILD),
            XmlField("author", "author", omitempty=True),
            XmlField("category", "category", omitempty=True),
            XmlField("comments", "comments", omitempty=True),
            XmlField("enclosure", kind=CHILD),
            XmlField("guid", "guid", omitempty=True),
            XmlField("pub_date", "pubDate", omitempty=True),
            XmlField("source", "source", omitempty=True),
            XmlField("creator", "dc:creator", omitempty=True),
            XmlField("hero_image", "amzn:heroImage", omitempty=True),
            XmlField("intro_text", "amzn:introText", omitempty=True),
            XmlField("index_content", "amzn:indexContent", omitempty=True),
            XmlField("products", kind=CHILDREN),
        ),
    ),
    AmazonProduct: XmlSchema(
        "amzn:product",
        (
            XmlField("url", "amzn:productURL"),
            XmlField("headline", "amzn:productHeadline"),
            XmlField("award", "amzn:award"),
            XmlField("summary", "amzn:productSummary"),
        ),
    ),
    # Written as escaped text; ElementTree cannot emit a CDATA section.
    RssContent: XmlSchema("content:encoded", (XmlField("content", kind=TEXT),)),
    RssEnclosure: XmlSchema(
        "enclosure",
        (
            XmlField("url", "url", ATTRIBUTE),
            XmlField("length", "length", ATTRIBUTE),
            XmlField("type", "type", ATTRIBUTE),
        ),
    ),
    RssImage: XmlSchema(
        "image",
        (
            XmlField("url", "url"),
            XmlField("title", "title"),
            XmlField("link", "link"),
            XmlField("width", "width", omitempty=True),
            XmlField("height", "height", omitempty=True),
        ),
    ),
    RssTextInput: XmlSchema(
        "textInput",
        (
            XmlField("title", "title"),
            XmlField("description", "description"),
            XmlField("name", "name"),
            XmlField("link", "link"),
        ),
    ),
}


def is_empty(value: Any) -> bool:
    """Zero value test used for ``omitempty`` fields."""
    return value is None or value == "" or value == 0 or value == ()


def sanitize_text(text: str) -> str:
    """Replace characters XML 1.0 does not allow with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", text)


def format_scalar(value: Any) -> str:
    """Render a scalar the way feed readers expect it (``1.0`` becomes ``1``)."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return sanitize_text(str(value))


def schema_for(value: Any) -> XmlSchema:
    """Look up the schema of a dialect value.

    Raises:
        TypeError: If the value's type has no registered schema
    """
    try:
        return SCHEMAS[type(value)]
    except KeyError:
        raise TypeError(
            f"No XML schema registered for {type(value).__name__}"
        ) from None


def to_element(value: Any) -> ET.Element:
    """Build the element tree for a dialect value.

    Args:
        value: An envelope, channel, item or supporting dialect type

    Returns:
        Root element of the value's tree

    Raises:
        TypeError: If the value, or a nested value, has no schema
    """
    schema = schema_for(value)
    element = ET.Element(schema.tag)

    for binding in schema.fields:
        field_value = getattr(value, binding.attr)

        if binding.kind == ATTRIBUTE:
            if binding.omitempty and is_empty(field_value):
                continue
            element.set(binding.name, format_scalar(field_value))
        elif binding.kind == TEXT:
            element.text = format_scalar(field_value)
        elif binding.kind == CHILD:
            # Absent structures are always dropped.
            if field_value is not None:
                element.append(to_element(field_value))
        elif binding.kind == CHILDREN:
            for child in field_value:
                element.append(to_element(child))
        else:
            if binding.omitempty and is_empty(field_value):
                continue
            ET.SubElement(element, binding.name).text = format_scalar(field_value)

    return element


class XmlSerializer:
    """Renders dialect values as XML documents."""

    def __init__(
        self,
        config: SerializerConfig | None = None,
        execution_id: str | None = None,
    ):
        """Initialize the serializer.

        Args:
            config: Output settings, read from the environment when omitted
            execution_id: Execution ID for logging context
        """
        self.config = config or Config().get_serializer_config()
        self.logger = create_execution_logger("serializer", execution_id)

    def _render(self, value: Any, encoding: str) -> str:
        root = to_element(value)
        if self.config.indent:
            ET.indent(root, space=self.config.indent)

        body = ET.tostring(root, encoding="unicode")
        header = ""
        if self.config.xml_declaration:
            header = f'<?xml version="1.0" encoding="{encoding}"?>\n'

        document = header + body
        self.logger.info(
            "Rendered XML document",
            root=root.tag,
            document_length=len(document),
        )
        return document

    def to_xml(self, value: Any) -> str:
        """Render a dialect value as XML text.

        The text is not yet encoded, so its declaration always names UTF-8.
        Use ``to_bytes`` for any other configured encoding.

        Args:
            value: Usually the envelope returned by ``feed_xml()``

        Returns:
            Document text, prefixed with the XML declaration when enabled
        """
        return self._render(value, "UTF-8")

    def to_bytes(self, value: Any) -> bytes:
        """Render a dialect value encoded with the configured encoding.

        Characters the encoding cannot represent become character references.

        Args:
            value: Usually the envelope returned by ``feed_xml()``

        Returns:
            Encoded document whose declaration matches its bytes
        """
        encoding = self.config.encoding
        return self._render(value, encoding).encode(encoding, "xmlcharrefreplace")

    def write_xml(self, value: Any, stream: BinaryIO) -> None:
        """Write the encoded document to a binary stream.

        Args:
            value: Dialect value to render
            stream: Writable binary stream owned by the caller
        """
        stream.write(self.to_bytes(value))


def to_xml(value: Any, config: SerializerConfig | None = None) -> str:
    """Render a dialect value with a one-off serializer."""
    return XmlSerializer(config).to_xml(value)


def to_bytes(value: Any, config: SerializerConfig | None = None) -> bytes:
    """Render and encode a dialect value with a one-off serializer."""
    return XmlSerializer(config).to_bytes(value)


def write_xml(
    value: Any, stream: BinaryIO, config: SerializerConfig | None = None
) -> None:
    """Write a dialect value to ``stream`` with a one-off serializer."""
    XmlSerializer(config).write_xml(value, stream)
