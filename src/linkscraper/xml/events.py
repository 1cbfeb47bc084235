"""Incremental XML event reader on top of the hardened expat SAX driver."""

import io
import logging
from collections import deque
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import IO, Optional, Union
from xml.sax import SAXException, SAXParseException
from xml.sax.handler import (
    ContentHandler,
    LexicalHandler,
    feature_namespaces,
    property_lexical_handler,
)

from defusedxml import DefusedXmlException
from defusedxml.expatreader import DefusedExpatParser

from ..errors import ScrapeIOError, XmlParseError
from ..models.config import DEFAULT_CHUNK_SIZE
from ..models.links import QName, TextPosition, XmlAttribute

logger = logging.getLogger(__name__)

XmlSource = Union[bytes, bytearray, memoryview, str, IO[bytes], IO[str]]


@dataclass(frozen=True)
class StartDocument:
    pass


@dataclass(frozen=True)
class StartElement:
    """
    A start tag.

    ``namespaces`` maps every prefix declared in the document and in scope at
    this element to its URI; the default namespace uses the prefix ``""``.
    A prefix undeclared with an empty URI, such as ``xmlns=""``, is absent.
    """

    name: QName
    attributes: tuple[XmlAttribute, ...] = ()
    namespaces: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EndElement:
    name: QName


@dataclass(frozen=True)
class Characters:
    text: str


@dataclass(frozen=True)
class Whitespace:
    text: str


@dataclass(frozen=True)
class CData:
    text: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class ProcessingInstruction:
    target: str
    data: str


@dataclass(frozen=True)
class EndDocument:
    pass


XmlEvent = Union[
    StartDocument,
    StartElement,
    EndElement,
    Characters,
    Whitespace,
    CData,
    Comment,
    ProcessingInstruction,
    EndDocument,
]


def _split_expat_name(raw: str) -> QName:
    """Split expat's ``"uri local prefix"`` name triplet into a QName."""
    parts = raw.split(" ")
    if len(parts) == 1:
        return QName(local_name=raw)
    if len(parts) == 2:
        return QName(local_name=parts[1], namespace=parts[0])
    return QName(local_name=parts[1], namespace=parts[0], prefix=parts[2])


class _EventBuffer(ContentHandler, LexicalHandler):
    """
    Collects SAX callbacks into ``(event, position)`` pairs.

    Character data arrives in arbitrary pieces and is coalesced until the
    next structural callback.
    """

    def __init__(self) -> None:
        super().__init__()
        self.events: deque[tuple[XmlEvent, TextPosition]] = deque()
        self._parser: Optional["_EventParser"] = None
        self._scopes: list[dict[str, str]] = [{}]
        self._pending_namespaces: dict[str, Optional[str]] = {}
        self._text: list[str] = []
        self._text_position: Optional[TextPosition] = None
        self._cdata_position: Optional[TextPosition] = None

    def bind(self, parser: "_EventParser") -> None:
        self._parser = parser

    def _position(self) -> TextPosition:
        assert self._parser is not None
        return self._parser.current_position()

    def _emit(self, event: XmlEvent, position: Optional[TextPosition] = None) -> None:
        self.events.append((event, position or self._position()))

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text)
        position = self._text_position or self._position()
        self._text = []
        self._text_position = None
        self._emit(Whitespace(text) if text.isspace() else Characters(text), position)

    # ContentHandler

    def startDocument(self) -> None:
        self._emit(StartDocument(), TextPosition(1, 0))

    def endDocument(self) -> None:
        self._flush_text()
        self._emit(EndDocument())

    def startPrefixMapping(self, prefix: Optional[str], uri: Optional[str]) -> None:
        # uri is None for an undeclaration such as xmlns=""
        self._pending_namespaces[prefix or ""] = uri

    def endPrefixMapping(self, prefix: Optional[str]) -> None:
        pass

    def start_element(self, name: QName, attributes: tuple[XmlAttribute, ...]) -> None:
        self._flush_text()
        scope = self._scopes[-1]
        if self._pending_namespaces:
            merged = {**scope, **self._pending_namespaces}
            scope = {prefix: uri for prefix, uri in merged.items() if uri}
            self._pending_namespaces = {}
        self._scopes.append(scope)
        self._emit(StartElement(name, attributes, scope))

    def end_element(self, name: QName) -> None:
        self._flush_text()
        self._scopes.pop()
        self._emit(EndElement(name))

    def characters(self, content: str) -> None:
        if not self._text and self._cdata_position is None:
            self._text_position = self._position()
        self._text.append(content)

    def ignorableWhitespace(self, whitespace: str) -> None:
        self.characters(whitespace)

    def processingInstruction(self, target: str, data: str) -> None:
        self._flush_text()
        self._emit(ProcessingInstruction(target, data))

    # LexicalHandler

    def comment(self, content: str) -> None:
        self._flush_text()
        self._emit(Comment(content))

    def startCDATA(self) -> None:
        self._flush_text()
        self._cdata_position = self._position()

    def endCDATA(self) -> None:
        position = self._cdata_position or self._position()
        text = "".join(self._text)
        self._text = []
        self._cdata_position = None
        self._emit(CData(text), position)


class _EventParser(DefusedExpatParser):
    """
    Namespace-aware expat driver that reports prefixed names.

    The stock SAX driver drops element prefixes; these overrides hand the
    full name triplet to the event buffer instead.
    """

    def __init__(self, buffer: _EventBuffer, bufsize: int = DEFAULT_CHUNK_SIZE):
        super().__init__(namespaceHandling=1, bufsize=bufsize)
        self.setFeature(feature_namespaces, True)
        self.setContentHandler(buffer)
        self.setProperty(property_lexical_handler, buffer)
        self._buffer = buffer
        buffer.bind(self)

    def current_position(self) -> TextPosition:
        """Position the tokenizer is currently reporting."""
        return TextPosition(self.getLineNumber(), self.getColumnNumber() or 0)

    def start_element_ns(self, name: str, attrs: dict[str, str]) -> None:
        attributes = tuple(
            XmlAttribute(_split_expat_name(raw_name), value) for raw_name, value in attrs.items()
        )
        self._buffer.start_element(_split_expat_name(name), attributes)

    def end_element_ns(self, name: str) -> None:
        self._buffer.end_element(_split_expat_name(name))


class XmlEventReader:
    """
    Pull-style reader producing XML events from bytes, text or a stream.

    The document is fed to the tokenizer in chunks, so only the events of
    the current chunk are buffered. ``position()`` reports where the most
    recently yielded event starts.

    Example:
        reader = XmlEventReader(b"<root>https://example.com</root>")
        for event in reader:
            if isinstance(event, Characters):
                print(reader.position(), event.text)
    """

    def __init__(self, source: XmlSource, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Initialize the reader.

        Args:
            source: Document as bytes, str, or a readable binary/text stream
            chunk_size: Number of bytes (or characters) read per tokenizer feed

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._stream: IO = io.BytesIO(bytes(source))
        elif isinstance(source, str):
            self._stream = io.StringIO(source)
        else:
            self._stream = source
        self._chunk_size = chunk_size
        self._buffer = _EventBuffer()
        self._parser = _EventParser(self._buffer, bufsize=chunk_size)
        self._position = TextPosition(1, 0)
        self._error: Optional[Exception] = None
        self._finished = False

    def __iter__(self) -> Iterator[XmlEvent]:
        return self

    def __next__(self) -> XmlEvent:
        events = self._buffer.events
        while not events:
            if self._error is not None:
                error, self._error = self._error, None
                raise error
            if self._finished:
                raise StopIteration
            self._pump()
        event, self._position = events.popleft()
        return event

    def position(self) -> TextPosition:
        return self._position

    def _pump(self) -> None:
        """Feed the next chunk to the tokenizer, or finish the document."""
        try:
            chunk = self._stream.read(self._chunk_size)
        except OSError as e:
            self._finished = True
            raise ScrapeIOError(f"Failed to read XML input: {e}") from e

        try:
            self._parser.feed(chunk)
            if not chunk:
                self._finished = True
                self._parser.close()
        except SAXParseException as e:
            self._fail(XmlParseError(e.getMessage(), e.getLineNumber(), e.getColumnNumber()), e)
        except DefusedXmlException as e:
            position = self._parser.current_position()
            self._fail(XmlParseError(str(e), position.line, position.column), e)
        except SAXException as e:
            self._fail(XmlParseError(e.getMessage()), e)

    def _fail(self, error: XmlParseError, cause: Exception) -> None:
        error.__cause__ = cause
        logger.debug(f"XML tokenizer failed: {error}")
        self._error = error
        self._finished = True
