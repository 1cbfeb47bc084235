"""XLink-aware scraper enforcing the nesting rules of extended links."""

import logging
from enum import Enum
from typing import Literal, Optional, Union, assert_never

from ...errors import (
    ArcOutsideOfExtendedError,
    ExtendedInsideOfExtendedError,
    LocatorOutsideOfExtendedError,
    ResourceOutsideOfExtendedError,
    SimpleInsideOfExtendedError,
)
from ...matching import UrlMatcher, find_urls
from ...models.config import DEFAULT_CHUNK_SIZE
from ...models.links import TextPosition, XLinkLink, XLinkLinkKind
from ..events import EndDocument, EndElement, StartElement, XmlSource
from ..protocols import EventStream
from ..scraper import open_event_stream
from .elements import (
    XLinkArc,
    XLinkElement,
    XLinkExtended,
    XLinkLocator,
    XLinkResource,
    XLinkSimple,
    XLinkTitle,
    classify,
)

logger = logging.getLogger(__name__)

EndMatching = Literal["name", "depth"]


class ScrapeState(str, Enum):
    """Where the scraper is relative to extended links."""

    IDLE = "idle"
    INSIDE_EXTENDED = "inside_extended"


class XLinkScraper:
    """
    Walks an event stream once and collects XLink references.

    Top-level elements may be simple or extended links. Inside an extended
    link only locators, arcs, resources and titles are allowed; anything
    else aborts the scrape.

    Example:
        scraper = XLinkScraper(XmlEventReader(document))
        links = scraper.run()
    """

    def __init__(
        self,
        events: EventStream,
        *,
        matcher: Optional[UrlMatcher] = None,
        end_matching: EndMatching = "name",
        filter_locator_href: bool = False,
    ):
        """
        Initialize the scraper.

        Args:
            events: Event stream to consume
            matcher: URL matcher (default: ``find_urls``)
            end_matching: 'name' leaves an extended link at the first end tag
                with its name; 'depth' skips end tags of nested same-named elements
            filter_locator_href: Run locator hrefs through the matcher instead
                of reporting them verbatim
        """
        self._events = events
        self._find = matcher or find_urls
        self._end_matching = end_matching
        self._filter_locator_href = filter_locator_href
        self.state = ScrapeState.IDLE

    def run(self) -> list[XLinkLink]:
        """
        Consume the stream and return every link found.

        Raises:
            XLinkFormatError: If an element violates the XLink vocabulary
            XmlParseError: If the document is malformed
        """
        collector: list[XLinkLink] = []
        for event in self._events:
            if isinstance(event, StartElement):
                position = self._events.position()
                element = classify(event, position)
                if element is not None:
                    collector.extend(self._scrape_top_level(element, position))
            elif isinstance(event, EndDocument):
                break

        logger.debug(f"Scraped {len(collector)} XLink links")
        return collector

    def _scrape_top_level(self, element: XLinkElement, position: TextPosition) -> list[XLinkLink]:
        if isinstance(element, XLinkSimple):
            return [
                *self._links_from(element.href, XLinkLinkKind.SIMPLE, position),
                *self._links_from(element.arcrole, XLinkLinkKind.ARC_ROLE, position),
                *self._links_from(element.role, XLinkLinkKind.ROLE, position),
            ]
        if isinstance(element, XLinkExtended):
            return self._scrape_extended(element, position)
        if isinstance(element, XLinkLocator):
            raise LocatorOutsideOfExtendedError(element=element.name, position=position)
        if isinstance(element, XLinkArc):
            raise ArcOutsideOfExtendedError(element=element.name, position=position)
        if isinstance(element, XLinkResource):
            raise ResourceOutsideOfExtendedError(element=element.name, position=position)
        if isinstance(element, XLinkTitle):
            return []
        assert_never(element)

    def _scrape_extended(self, extended: XLinkExtended, position: TextPosition) -> list[XLinkLink]:
        links = self._links_from(extended.role, XLinkLinkKind.ROLE, position)
        self.state = ScrapeState.INSIDE_EXTENDED
        logger.debug(f"Entered extended link <{extended.name}> at {position}")

        depth = 1
        for event in self._events:
            if isinstance(event, StartElement):
                if self._end_matching == "depth" and event.name == extended.name:
                    depth += 1
                child_position = self._events.position()
                child = classify(event, child_position)
                if child is not None:
                    links.extend(self._scrape_inside_extended(child, child_position))
            elif isinstance(event, EndElement) and event.name == extended.name:
                depth -= 1
                if self._end_matching == "name" or depth == 0:
                    break
            elif isinstance(event, EndDocument):
                break

        self.state = ScrapeState.IDLE
        logger.debug(f"Left extended link <{extended.name}> with {len(links)} links")
        return links

    def _scrape_inside_extended(self, element: XLinkElement, position: TextPosition) -> list[XLinkLink]:
        if isinstance(element, XLinkLocator):
            if self._filter_locator_href:
                href_links = self._links_from(element.href, XLinkLinkKind.EXTENDED, position)
            else:
                href_links = [XLinkLink(element.href, position, XLinkLinkKind.EXTENDED)]
            return [*href_links, *self._links_from(element.role, XLinkLinkKind.ROLE, position)]
        if isinstance(element, XLinkArc):
            return self._links_from(element.arcrole, XLinkLinkKind.ARC_ROLE, position)
        if isinstance(element, XLinkResource):
            return self._links_from(element.role, XLinkLinkKind.ROLE, position)
        if isinstance(element, XLinkTitle):
            return []
        if isinstance(element, XLinkSimple):
            raise SimpleInsideOfExtendedError(element=element.name, position=position)
        if isinstance(element, XLinkExtended):
            raise ExtendedInsideOfExtendedError(element=element.name, position=position)
        assert_never(element)

    def _links_from(
        self,
        value: Optional[str],
        kind: XLinkLinkKind,
        position: TextPosition,
    ) -> list[XLinkLink]:
        """Links for every URL inside an optional attribute value."""
        if value is None:
            return []
        return [XLinkLink(match.text, position, kind) for match in self._find(value)]


def scrape(
    source: Union[XmlSource, EventStream],
    *,
    matcher: Optional[UrlMatcher] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    end_matching: EndMatching = "name",
    filter_locator_href: bool = False,
) -> list[XLinkLink]:
    """
    Scrape XLink references (hrefs, roles and arcroles) from an XML document.

    Args:
        source: XML bytes, str, readable stream, or an event stream
        matcher: URL matcher (default: ``find_urls``)
        chunk_size: Read size when ``source`` is not an event stream yet
        end_matching: How the end of an extended link is detected ('name' or 'depth')
        filter_locator_href: Run locator hrefs through the matcher

    Returns:
        Links in document order

    Raises:
        XLinkFormatError: If an element violates the XLink vocabulary
        XmlParseError: If the document is malformed
        ScrapeIOError: If the input stream cannot be read
    """
    scraper = XLinkScraper(
        open_event_stream(source, chunk_size),
        matcher=matcher,
        end_matching=end_matching,
        filter_locator_href=filter_locator_href,
    )
    return scraper.run()
