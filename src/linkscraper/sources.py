"""Convenience entry points: run a scraper on bytes, a file, or a stream."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from .errors import ScrapeIOError
from .models.config import ScrapeConfig, ScrapeFormat
from .text import scrape as scrape_text
from .xml import scrape as scrape_xml
from .xml import scrape_hrefs
from .xml.svg import scrape as scrape_svg
from .xml.xlink import scrape as scrape_xlink

logger = logging.getLogger(__name__)

T = TypeVar("T")
Scraper = Callable[..., list[T]]

XML_SUFFIXES = frozenset(
    {".xml", ".xhtml", ".xht", ".xsd", ".xsl", ".xslt", ".rss", ".atom", ".rdf", ".kml", ".gpx", ".xbrl", ".dita"}
)

SCRAPERS: dict[str, Callable[..., list[Any]]] = {
    "xml": scrape_xml,
    "hrefs": scrape_hrefs,
    "xlink": scrape_xlink,
    "svg": scrape_svg,
    "text": scrape_text,
}


def scrape_from_bytes(data: bytes, scraper: Scraper[T], **options: Any) -> list[T]:
    """Run a scraper over an in-memory document."""
    return scraper(data, **options)


def scrape_from_stream(stream: IO[bytes], scraper: Scraper[T], **options: Any) -> list[T]:
    """Run a scraper over an open binary stream; the stream is left open."""
    return scraper(stream, **options)


def scrape_from_file(path: Union[str, Path], scraper: Scraper[T], **options: Any) -> list[T]:
    """
    Open a file and run a scraper over its contents.

    Args:
        path: File to read
        scraper: Any scrape function (e.g. ``linkscraper.xml.scrape``)
        **options: Extra keyword arguments for the scraper

    Returns:
        The scraper's links

    Raises:
        ScrapeIOError: If the file cannot be opened or read
    """
    path = Path(path)
    try:
        stream = path.open("rb")
    except OSError as e:
        raise ScrapeIOError(f"Failed to open {path}: {e}", path=str(path)) from e

    with stream:
        try:
            links = scraper(stream, **options)
        except ScrapeIOError as e:
            e.path = str(path)
            raise
    logger.debug(f"Scraped {len(links)} links from {path}")
    return links


def detect_format(path: Union[str, Path]) -> ScrapeFormat:
    """
    Pick a scraper format from the file suffix.

    Returns:
        'svg' for SVG images, 'xml' for the XML family, 'text' otherwise
    """
    suffix = Path(path).suffix.lower()
    if suffix == ".svg":
        return "svg"
    if suffix in XML_SUFFIXES:
        return "xml"
    return "text"


def scraper_options(fmt: ScrapeFormat, config: ScrapeConfig) -> dict[str, Any]:
    """Keyword arguments a scraper accepts, taken from the config."""
    if fmt == "text":
        return {}
    options: dict[str, Any] = {"chunk_size": int(config.chunk_size)}
    if fmt == "xlink":
        options["end_matching"] = config.xlink.end_matching
        options["filter_locator_href"] = config.xlink.filter_locator_href
    return options


def scrape_any(path: Union[str, Path], config: Optional[ScrapeConfig] = None) -> list[Any]:
    """
    Scrape a file with the scraper selected by ``config.format``.

    With format 'auto' the scraper is chosen by ``detect_format``.

    Raises:
        ScrapeIOError: If the file cannot be read
        XmlParseError: If an XML-based format is malformed
        XLinkFormatError: If the xlink format finds invalid XLink markup
    """
    config = config or ScrapeConfig()
    fmt: ScrapeFormat = detect_format(path) if config.format == "auto" else config.format
    logger.debug(f"Scraping {path} as {fmt}")
    return scrape_from_file(path, SCRAPERS[fmt], **scraper_options(fmt, config))
