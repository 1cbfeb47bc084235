"""Generic link scraper for any XML document."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..matching import UrlMatcher, find_urls
from ..models.config import DEFAULT_CHUNK_SIZE
from ..models.links import (
    AttributeKind,
    CDataKind,
    CommentKind,
    NamespaceKind,
    PlainTextKind,
    QName,
    TextPosition,
    XmlAttribute,
    XmlLink,
)
from .events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    StartElement,
    XmlEventReader,
    XmlSource,
)
from .protocols import EventStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamespaceOccurrence:
    """A namespace binding and where it was first seen; the position is ignored by ``==``."""

    prefix: str
    uri: str
    first_occurrence: TextPosition = field(compare=False)


def open_event_stream(
    source: Union[XmlSource, EventStream],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> EventStream:
    """Wrap raw input in an ``XmlEventReader``; event streams are returned as-is."""
    if hasattr(source, "position") and hasattr(source, "__next__"):
        return source  # type: ignore[return-value]
    return XmlEventReader(source, chunk_size=chunk_size)  # type: ignore[arg-type]


def scrape(
    source: Union[XmlSource, EventStream],
    *,
    matcher: Optional[UrlMatcher] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[XmlLink]:
    """
    Scrape links from any XML document.

    Every attribute value, comment, text node and CDATA section is run
    through the URL matcher. Namespace URIs are reported once per unique
    (prefix, URI) pair, after the rest of the document.

    Text and CDATA links name the innermost element still open around them.
    Text after a closed child belongs to the enclosing element, not to the
    child, unlike scrapers that only track the most recent start tag.

    Args:
        source: XML bytes, str, readable stream, or an event stream
        matcher: URL matcher (default: ``find_urls``)
        chunk_size: Read size when ``source`` is not an event stream yet

    Returns:
        Links in document order, namespace links last

    Raises:
        XmlParseError: If the document is malformed
        ScrapeIOError: If the input stream cannot be read
    """
    find = matcher or find_urls
    events = open_event_stream(source, chunk_size)
    collector: list[XmlLink] = []
    namespaces: list[NamespaceOccurrence] = []
    open_elements: list[QName] = []

    def parent() -> Optional[QName]:
        return open_elements[-1] if open_elements else None

    for event in events:
        if isinstance(event, StartElement):
            for prefix, uri in event.namespaces.items():
                occurrence = NamespaceOccurrence(prefix, uri, events.position())
                if occurrence not in namespaces:
                    namespaces.append(occurrence)
            open_elements.append(event.name)
            collector.extend(_scrape_attributes(event.attributes, events.position(), matcher=find))
        elif isinstance(event, EndElement):
            if open_elements:
                open_elements.pop()
        elif isinstance(event, Comment):
            collector.extend(
                XmlLink(match.text, events.position(), CommentKind()) for match in find(event.text)
            )
        elif isinstance(event, Characters):
            collector.extend(
                XmlLink(match.text, events.position(), PlainTextKind(parent()))
                for match in find(event.text)
            )
        elif isinstance(event, CData):
            collector.extend(
                XmlLink(match.text, events.position(), CDataKind(parent()))
                for match in find(event.text)
            )
        elif isinstance(event, EndDocument):
            break

    logger.debug(f"Collected {len(namespaces)} unique namespace bindings")

    for occurrence in namespaces:
        # The whole URI is reported; the matcher only decides whether it looks like a URL
        if not find(occurrence.uri):
            continue
        collector.append(
            XmlLink(occurrence.uri, occurrence.first_occurrence, NamespaceKind(occurrence.prefix))
        )

    logger.debug(f"Scraped {len(collector)} links from XML document")
    return collector


def scrape_hrefs(
    source: Union[XmlSource, EventStream],
    *,
    matcher: Optional[UrlMatcher] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[XmlLink]:
    """
    Scrape links from ``href`` attributes only, regardless of namespace or tag name.

    Args:
        source: XML bytes, str, readable stream, or an event stream
        matcher: URL matcher (default: ``find_urls``)
        chunk_size: Read size when ``source`` is not an event stream yet

    Returns:
        Attribute links whose attribute local name is ``href``
    """
    return [
        link
        for link in scrape(source, matcher=matcher, chunk_size=chunk_size)
        if isinstance(link.kind, AttributeKind) and link.kind.attribute.name.local_name == "href"
    ]


def _scrape_attributes(
    attributes: tuple[XmlAttribute, ...],
    position: TextPosition,
    *,
    matcher: UrlMatcher,
) -> list[XmlLink]:
    links: list[XmlLink] = []
    for attribute in attributes:
        links.extend(
            XmlLink(match.text, position, AttributeKind(attribute)) for match in matcher(attribute.value)
        )
    return links
