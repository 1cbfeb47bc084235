"""Tests for the incremental XML event reader."""

import io

import pytest

from linkscraper.errors import ScrapeIOError, XmlParseError
from linkscraper.models.links import QName, TextPosition
from linkscraper.xml.events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
    Whitespace,
    XmlEventReader,
)


class FailingStream(io.RawIOBase):
    """Binary stream whose reads always fail."""

    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("disk on fire")


class TestEventSequence:
    """Tests for the events produced from a document."""

    def test_basic_sequence(self):
        """Test the event kinds for a small document."""
        doc = b'<root a="1"><!--c--><child>text</child><![CDATA[x]]><?pi data?></root>'
        events = list(XmlEventReader(doc))

        assert [type(e) for e in events] == [
            StartDocument,
            StartElement,
            Comment,
            StartElement,
            Characters,
            EndElement,
            CData,
            ProcessingInstruction,
            EndElement,
            EndDocument,
        ]
        assert events[1].name == QName("root")
        assert events[1].attributes[0].name == QName("a")
        assert events[1].attributes[0].value == "1"
        assert events[2] == Comment("c")
        assert events[4] == Characters("text")
        assert events[6] == CData("x")
        assert events[7] == ProcessingInstruction("pi", "data")

    def test_whitespace_is_separate_event(self):
        """Test that blank text is reported as whitespace."""
        events = list(XmlEventReader(b"<root>\n  <child/>\n</root>"))
        assert Whitespace("\n  ") in events
        assert not any(isinstance(e, Characters) for e in events)

    def test_text_is_coalesced(self):
        """Test that text split by entity references is one event."""
        events = list(XmlEventReader(b"<r>a &amp; b\nc</r>"))
        texts = [e for e in events if isinstance(e, Characters)]
        assert texts == [Characters("a & b\nc")]

    def test_small_chunks_give_same_events(self):
        """Test that chunked feeding does not change the events."""
        doc = b'<root xmlns:x="http://x.test/"><x:a href="https://a.test">hi https://b.test</x:a></root>'
        assert list(XmlEventReader(doc, chunk_size=3)) == list(XmlEventReader(doc))

    def test_str_source(self):
        """Test that text input is accepted."""
        events = list(XmlEventReader("<root>café</root>"))
        assert Characters("café") in events

    def test_stream_source(self):
        """Test that a binary stream is accepted."""
        events = list(XmlEventReader(io.BytesIO(b"<root/>")))
        assert [type(e) for e in events] == [StartDocument, StartElement, EndElement, EndDocument]

    def test_rejects_non_positive_chunk_size(self):
        """Test that a chunk size below one is refused."""
        with pytest.raises(ValueError):
            XmlEventReader(b"<root/>", chunk_size=0)


class TestNamespaces:
    """Tests for namespace handling."""

    DOC = b'<r xmlns="urn:a" xmlns:x="http://x.test/"><x:c x:attr="v"/><d xmlns:y="urn:y"/></r>'

    def test_declared_bindings_in_scope(self):
        """Test that start tags carry the bindings in scope."""
        starts = [e for e in XmlEventReader(self.DOC) if isinstance(e, StartElement)]
        assert dict(starts[0].namespaces) == {"": "urn:a", "x": "http://x.test/"}
        assert dict(starts[1].namespaces) == {"": "urn:a", "x": "http://x.test/"}
        assert dict(starts[2].namespaces) == {"": "urn:a", "x": "http://x.test/", "y": "urn:y"}

    def test_bindings_go_out_of_scope(self):
        """Test that a sibling does not see bindings of a closed element."""
        doc = b'<r><a xmlns:p="urn:p"/><b/></r>'
        starts = [e for e in XmlEventReader(doc) if isinstance(e, StartElement)]
        assert dict(starts[1].namespaces) == {"p": "urn:p"}
        assert dict(starts[2].namespaces) == {}

    def test_default_namespace_undeclared(self):
        """Test that xmlns="" removes the default binding for the subtree."""
        doc = b'<r xmlns="http://a.test/"><c xmlns=""><d>x</d></c><e/></r>'
        starts = [e for e in XmlEventReader(doc) if isinstance(e, StartElement)]
        assert dict(starts[0].namespaces) == {"": "http://a.test/"}
        assert dict(starts[1].namespaces) == {}
        assert dict(starts[2].namespaces) == {}
        assert starts[2].name == QName("d")
        assert dict(starts[3].namespaces) == {"": "http://a.test/"}

    def test_prefixed_names(self):
        """Test that element and attribute names keep prefix and URI."""
        starts = [e for e in XmlEventReader(self.DOC) if isinstance(e, StartElement)]
        assert starts[0].name == QName("r", "urn:a")
        assert starts[1].name == QName("c", "http://x.test/", "x")
        assert str(starts[1].name) == "x:c"
        assert starts[1].attributes[0].name == QName("attr", "http://x.test/", "x")

    def test_end_element_name_matches_start(self):
        """Test that end tags report the same qualified name."""
        events = list(XmlEventReader(self.DOC))
        ends = [e for e in events if isinstance(e, EndElement)]
        assert ends[0].name == QName("c", "http://x.test/", "x")


class TestPositions:
    """Tests for position tracking."""

    def test_start_element_positions(self):
        """Test that position() reports the start of the last event."""
        reader = XmlEventReader(b"<root>\n  <child/>\n</root>")
        positions = {}
        for event in reader:
            if isinstance(event, StartElement):
                positions[event.name.local_name] = reader.position()

        assert positions["root"] == TextPosition(1, 0)
        assert positions["child"] == TextPosition(2, 2)

    def test_position_string(self):
        """Test the line:column rendering."""
        assert str(TextPosition(3, 7)) == "3:7"


class TestErrors:
    """Tests for tokenizer and I/O failures."""

    def test_mismatched_tag(self):
        """Test that malformed markup raises XmlParseError."""
        with pytest.raises(XmlParseError) as exc_info:
            list(XmlEventReader(b"<root><child></root>"))
        assert exc_info.value.line == 1

    def test_events_before_error_are_yielded(self):
        """Test that the stream yields what it parsed before failing."""
        reader = XmlEventReader(b"<root><child></root>")
        seen = []
        with pytest.raises(XmlParseError):
            for event in reader:
                seen.append(event)
        assert StartElement(QName("root")) in seen

    def test_truncated_document(self):
        """Test that a document cut short raises XmlParseError."""
        with pytest.raises(XmlParseError):
            list(XmlEventReader(b"<root><child>"))

    def test_empty_document(self):
        """Test that empty input is not a document."""
        with pytest.raises(XmlParseError):
            list(XmlEventReader(b""))

    def test_entity_declarations_forbidden(self):
        """Test that entity declarations are rejected."""
        doc = b'<!DOCTYPE r [<!ENTITY e "boom">]><r>&e;</r>'
        with pytest.raises(XmlParseError) as exc_info:
            list(XmlEventReader(doc))
        assert exc_info.value.__cause__ is not None

    def test_stream_ends_after_error(self):
        """Test that the stream is exhausted once the error was raised."""
        reader = XmlEventReader(b"<root>")
        with pytest.raises(XmlParseError):
            list(reader)
        assert list(reader) == []

    def test_read_failure(self):
        """Test that read failures are I/O errors, not parse errors."""
        with pytest.raises(ScrapeIOError) as exc_info:
            list(XmlEventReader(FailingStream()))
        assert isinstance(exc_info.value.__cause__, OSError)
