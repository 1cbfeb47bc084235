"""
linkscraper - Find every URL referenced by a document, with its location and context.

Usage:
    from linkscraper import xml, xlink

    for link in xml.scrape(Path("catalog.xml").read_bytes()):
        print(link.location, link.kind.label, link.url)

    for link in xlink.scrape(document):
        print(link.kind.value, link.url)
"""

__version__ = "0.2.0"

from . import text
from .errors import (
    ArcOutsideOfExtendedError,
    ExtendedInsideOfExtendedError,
    InvalidNestingError,
    LinkScraperError,
    LocatorOutsideOfExtendedError,
    MissingRequiredAttributeError,
    ResourceOutsideOfExtendedError,
    ScrapeIOError,
    SimpleInsideOfExtendedError,
    UnknownTypeError,
    XLinkFormatError,
    XmlParseError,
)
from .matching import UrlMatch, find_urls
from .models.config import ScrapeConfig, XLinkConfig
from .models.links import TextPosition, XLinkLink, XLinkLinkKind, XmlLink
from .sources import detect_format, scrape_any, scrape_from_bytes, scrape_from_file, scrape_from_stream
from .xml import XmlEventReader, scrape_hrefs, svg, xlink
from .xml import scrape as scrape_xml

__all__ = [
    "__version__",
    # Scrapers
    "scrape_xml",
    "scrape_hrefs",
    "xlink",
    "svg",
    "text",
    "XmlEventReader",
    "find_urls",
    "UrlMatch",
    # Entry points
    "scrape_any",
    "scrape_from_bytes",
    "scrape_from_file",
    "scrape_from_stream",
    "detect_format",
    # Models
    "ScrapeConfig",
    "XLinkConfig",
    "TextPosition",
    "XmlLink",
    "XLinkLink",
    "XLinkLinkKind",
    # Errors
    "LinkScraperError",
    "ScrapeIOError",
    "XmlParseError",
    "XLinkFormatError",
    "UnknownTypeError",
    "MissingRequiredAttributeError",
    "InvalidNestingError",
    "LocatorOutsideOfExtendedError",
    "ArcOutsideOfExtendedError",
    "ResourceOutsideOfExtendedError",
    "SimpleInsideOfExtendedError",
    "ExtendedInsideOfExtendedError",
]
