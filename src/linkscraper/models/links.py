"""Link records emitted by the scrapers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True, order=True)
class TextPosition:
    """Line (1-based) and column (0-based) inside a document."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class QName:
    """
    A namespace-qualified XML name.

    Two names are equal when local name, namespace URI and prefix all match.
    """

    local_name: str
    namespace: Optional[str] = None
    prefix: Optional[str] = None

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name


@dataclass(frozen=True)
class XmlAttribute:
    """An attribute of a start tag."""

    name: QName
    value: str


# Generic scraper link kinds


@dataclass(frozen=True)
class AttributeKind:
    """
    The link is inside an attribute value.

    Example: ``<a href="https://link.example.com">``
    """

    attribute: XmlAttribute

    label = "attribute"


@dataclass(frozen=True)
class CommentKind:
    """
    The link is inside a comment.

    Example: ``<!-- see https://link.example.com -->``
    """

    label = "comment"


@dataclass(frozen=True)
class PlainTextKind:
    """
    The link is inside character data.

    Example: ``<p>see https://link.example.com</p>``
    """

    parent: Optional[QName] = None

    label = "text"


@dataclass(frozen=True)
class CDataKind:
    """
    The link is inside a CDATA section.

    Example::

        <script type="text/ecmascript">
            <![CDATA[ var scriptLink = "https://link.example.com"; ]]>
        </script>
    """

    parent: Optional[QName] = None

    label = "cdata"


@dataclass(frozen=True)
class NamespaceKind:
    """
    The link is a namespace URI. ``prefix`` is ``""`` for the default namespace.

    Example: ``<root xmlns="https://link.example.com">``
    """

    prefix: str

    label = "namespace"


XmlLinkKind = Union[AttributeKind, CommentKind, PlainTextKind, CDataKind, NamespaceKind]


def _kind_detail(kind: XmlLinkKind) -> Optional[str]:
    if isinstance(kind, AttributeKind):
        return str(kind.attribute.name)
    if isinstance(kind, (PlainTextKind, CDataKind)):
        return str(kind.parent) if kind.parent is not None else None
    if isinstance(kind, NamespaceKind):
        return kind.prefix
    return None


@dataclass(frozen=True)
class XmlLink:
    """A URL found by the generic XML scraper."""

    url: str
    location: TextPosition
    kind: XmlLinkKind

    def __str__(self) -> str:
        return self.url

    def to_dict(self) -> dict:
        """Convert link to dictionary for serialization."""
        return {
            "url": self.url,
            "line": self.location.line,
            "column": self.location.column,
            "kind": self.kind.label,
            "detail": _kind_detail(self.kind),
        }


# XLink scraper


class XLinkLinkKind(str, Enum):
    """Role of a URL inside the XLink vocabulary."""

    SIMPLE = "simple"
    EXTENDED = "extended"
    ROLE = "role"
    ARC_ROLE = "arcrole"


@dataclass(frozen=True)
class XLinkLink:
    """A URL found by the XLink scraper."""

    url: str
    location: TextPosition
    kind: XLinkLinkKind

    def __str__(self) -> str:
        return self.url

    def to_dict(self) -> dict:
        """Convert link to dictionary for serialization."""
        return {
            "url": self.url,
            "line": self.location.line,
            "column": self.location.column,
            "kind": self.kind.value,
        }


# SVG adapter


class SvgLinkKind(str, Enum):
    """Context of a URL inside an SVG image."""

    ATTRIBUTE = "attribute"
    COMMENT = "comment"
    TEXT = "text"
    SCRIPT = "script"
    NAMESPACE = "namespace"


@dataclass(frozen=True)
class SvgLink:
    """A URL found inside an SVG image."""

    url: str
    location: TextPosition
    kind: SvgLinkKind
    attribute: Optional[XmlAttribute] = field(default=None, compare=False)
    namespace_prefix: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.url

    def to_dict(self) -> dict:
        """Convert link to dictionary for serialization."""
        detail: Optional[str] = None
        if self.attribute is not None:
            detail = str(self.attribute.name)
        elif self.namespace_prefix is not None:
            detail = self.namespace_prefix
        return {
            "url": self.url,
            "line": self.location.line,
            "column": self.location.column,
            "kind": self.kind.value,
            "detail": detail,
        }


# Plain text scraper


@dataclass(frozen=True)
class TextFileLink:
    """A URL found in a plain-text file; the column is the match offset in its line."""

    url: str
    location: TextPosition

    def __str__(self) -> str:
        return self.url

    def to_dict(self) -> dict:
        """Convert link to dictionary for serialization."""
        return {
            "url": self.url,
            "line": self.location.line,
            "column": self.location.column,
            "kind": "text",
        }
