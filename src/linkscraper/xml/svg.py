"""SVG images: generic XML scraping with SVG-flavoured link kinds."""

from typing import Optional, Union, assert_never

from ..matching import UrlMatcher
from ..models.config import DEFAULT_CHUNK_SIZE
from ..models.links import (
    AttributeKind,
    CDataKind,
    CommentKind,
    NamespaceKind,
    PlainTextKind,
    SvgLink,
    SvgLinkKind,
    XmlLink,
)
from .events import XmlSource
from .protocols import EventStream
from .scraper import scrape as scrape_xml


def to_svg_link(link: XmlLink) -> SvgLink:
    """Relabel a generic XML link; CDATA inside SVG is script content."""
    kind = link.kind
    if isinstance(kind, AttributeKind):
        return SvgLink(link.url, link.location, SvgLinkKind.ATTRIBUTE, attribute=kind.attribute)
    if isinstance(kind, CommentKind):
        return SvgLink(link.url, link.location, SvgLinkKind.COMMENT)
    if isinstance(kind, PlainTextKind):
        return SvgLink(link.url, link.location, SvgLinkKind.TEXT)
    if isinstance(kind, CDataKind):
        return SvgLink(link.url, link.location, SvgLinkKind.SCRIPT)
    if isinstance(kind, NamespaceKind):
        return SvgLink(link.url, link.location, SvgLinkKind.NAMESPACE, namespace_prefix=kind.prefix)
    assert_never(kind)


def scrape(
    source: Union[XmlSource, EventStream],
    *,
    matcher: Optional[UrlMatcher] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[SvgLink]:
    """
    Scrape links from an SVG image.

    Raises:
        XmlParseError: If the image is not well-formed XML
        ScrapeIOError: If the input stream cannot be read
    """
    return [to_svg_link(link) for link in scrape_xml(source, matcher=matcher, chunk_size=chunk_size)]
