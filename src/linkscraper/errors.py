"""Exceptions raised while scraping links."""

from typing import Optional

from .models.links import QName, TextPosition


class LinkScraperError(Exception):
    """Base class for every error raised by linkscraper."""


class ScrapeIOError(LinkScraperError):
    """Reading the input failed. The original ``OSError`` is the ``__cause__``."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class XmlParseError(LinkScraperError):
    """The XML tokenizer rejected the document."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class XLinkFormatError(LinkScraperError):
    """
    The document breaks the rules of the XLink vocabulary.

    Attributes:
        element: Name of the offending element, if known
        position: Position of the offending start tag, if known
    """

    default_message = "Invalid XLink document."

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        element: Optional[QName] = None,
        position: Optional[TextPosition] = None,
    ):
        self.element = element
        self.position = position
        text = message or self.default_message
        if element is not None:
            text = f"{text} Element: <{element}>"
        if position is not None:
            text = f"{text} at {position}"
        super().__init__(text)


class UnknownTypeError(XLinkFormatError):
    """An ``xlink:type`` attribute holds a value outside the vocabulary."""

    def __init__(
        self,
        value: str,
        *,
        element: Optional[QName] = None,
        position: Optional[TextPosition] = None,
    ):
        self.value = value
        super().__init__(f"Unknown xlink:type value {value!r}.", element=element, position=position)


class MissingRequiredAttributeError(XLinkFormatError):
    """An XLink element lacks an attribute its type requires."""

    def __init__(
        self,
        attribute: str,
        *,
        element: Optional[QName] = None,
        position: Optional[TextPosition] = None,
    ):
        self.attribute = attribute
        super().__init__(
            f"XLink element is missing the required attribute xlink:{attribute}.",
            element=element,
            position=position,
        )


class InvalidNestingError(XLinkFormatError):
    """An XLink element appears where the vocabulary does not allow it."""

    default_message = "Invalid nesting of XLink elements."


class LocatorOutsideOfExtendedError(InvalidNestingError):
    default_message = "Found a locator-element outside of an extended element."


class ArcOutsideOfExtendedError(InvalidNestingError):
    default_message = "Found an arc-element outside of an extended element."


class ResourceOutsideOfExtendedError(InvalidNestingError):
    default_message = "Found a resource-element outside of an extended element."


class SimpleInsideOfExtendedError(InvalidNestingError):
    default_message = "Found a simple-element inside of an extended element."


class ExtendedInsideOfExtendedError(InvalidNestingError):
    default_message = "Found an extended-element inside of an extended element."
