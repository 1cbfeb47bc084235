"""XML link scraping: event stream, generic scraper, SVG and XLink dialects."""

from .events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
    Whitespace,
    XmlEvent,
    XmlEventReader,
    XmlSource,
)
from .protocols import EventStream
from .scraper import NamespaceOccurrence, open_event_stream, scrape, scrape_hrefs

__all__ = [
    # Events
    "EventStream",
    "XmlEvent",
    "XmlEventReader",
    "XmlSource",
    "StartDocument",
    "StartElement",
    "EndElement",
    "Characters",
    "Whitespace",
    "CData",
    "Comment",
    "ProcessingInstruction",
    "EndDocument",
    # Scraping
    "NamespaceOccurrence",
    "open_event_stream",
    "scrape",
    "scrape_hrefs",
]
