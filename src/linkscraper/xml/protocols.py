"""Protocol definitions for XML event streams."""

from collections.abc import Iterator
from typing import Protocol

from ..models.links import TextPosition
from .events import XmlEvent


class EventStream(Protocol):
    """
    A single-pass stream of structural XML events.

    Iterating yields events in document order and may raise
    ``XmlParseError`` (malformed markup) or ``ScrapeIOError`` (read failure),
    after which the stream is exhausted.
    """

    def __iter__(self) -> Iterator[XmlEvent]: ...

    def __next__(self) -> XmlEvent: ...

    def position(self) -> TextPosition:
        """
        Position of the most recently yielded event.

        Returns:
            Line (1-based) and column (0-based) of the start of the event
        """
        ...
