"""The ``<rss>`` document envelope around an Amazon RSS channel."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dialect import AmazonRssChannel

RSS_VERSION = "2.0"
CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"
DUBLIN_CORE_NAMESPACE = "http://purl.org/dc/elements/1.1/"
AMAZON_NAMESPACE = "https://amazon.com/ospublishing/1.0/"


@dataclass(frozen=True)
class AmazonRssEnvelope:
    """Root element carrying the format version and namespace declarations."""

    channel: "AmazonRssChannel"
    version: str = RSS_VERSION
    content_namespace: str = CONTENT_NAMESPACE
    dublin_core_namespace: str = DUBLIN_CORE_NAMESPACE
    amazon_namespace: str = AMAZON_NAMESPACE


def wrap(channel: "AmazonRssChannel") -> AmazonRssEnvelope:
    """Wrap a channel without inspecting or copying it.

    Args:
        channel: Channel to hold by reference

    Returns:
        Envelope with the fixed version and namespace URIs
    """
    return AmazonRssEnvelope(
        channel=channel,
        version=RSS_VERSION,
        content_namespace=CONTENT_NAMESPACE,
        dublin_core_namespace=DUBLIN_CORE_NAMESPACE,
        amazon_namespace=AMAZON_NAMESPACE,
    )
