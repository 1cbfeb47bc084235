"""XLink vocabulary support: element classification and link scraping."""

from .elements import (
    XLINK_NAMESPACE,
    XLinkArc,
    XLinkElement,
    XLinkExtended,
    XLinkLocator,
    XLinkResource,
    XLinkSimple,
    XLinkTitle,
    classify,
)
from .scraper import ScrapeState, XLinkScraper, scrape

__all__ = [
    "XLINK_NAMESPACE",
    # Elements
    "XLinkElement",
    "XLinkSimple",
    "XLinkExtended",
    "XLinkLocator",
    "XLinkArc",
    "XLinkResource",
    "XLinkTitle",
    "classify",
    # Scraping
    "ScrapeState",
    "XLinkScraper",
    "scrape",
]
