"""Linkscraper configuration and link models."""

from .config import DEFAULT_CHUNK_SIZE, ByteSize, ScrapeConfig, ScrapeFormat, XLinkConfig
from .links import (
    AttributeKind,
    CDataKind,
    CommentKind,
    NamespaceKind,
    PlainTextKind,
    QName,
    SvgLink,
    SvgLinkKind,
    TextFileLink,
    TextPosition,
    XLinkLink,
    XLinkLinkKind,
    XmlAttribute,
    XmlLink,
    XmlLinkKind,
)

__all__ = [
    # Config
    "DEFAULT_CHUNK_SIZE",
    "ByteSize",
    "ScrapeConfig",
    "ScrapeFormat",
    "XLinkConfig",
    # Positions and names
    "TextPosition",
    "QName",
    "XmlAttribute",
    # Generic XML links
    "XmlLink",
    "XmlLinkKind",
    "AttributeKind",
    "CommentKind",
    "PlainTextKind",
    "CDataKind",
    "NamespaceKind",
    # XLink
    "XLinkLink",
    "XLinkLinkKind",
    # SVG
    "SvgLink",
    "SvgLinkKind",
    # Plain text
    "TextFileLink",
]
