"""Tests for the convenience entry points."""

import io

import pytest

from linkscraper.errors import ScrapeIOError, XmlParseError
from linkscraper.models.config import ScrapeConfig, XLinkConfig
from linkscraper.models.links import SvgLink, TextFileLink, XLinkLink, XmlLink
from linkscraper.sources import (
    detect_format,
    scrape_any,
    scrape_from_bytes,
    scrape_from_file,
    scrape_from_stream,
)
from linkscraper.xml import scrape, scrape_hrefs
from linkscraper.xml import xlink

XML = b'<root><a href="https://a.test.com">https://text.test.com</a></root>'

NESTED_XLINK = (
    b'<doc xmlns:xlink="http://www.w3.org/1999/xlink">'
    b'<g xlink:type="extended"><g/><loc xlink:type="locator" xlink:href="https://l.test/"/></g>'
    b"</doc>"
)


class TestEntryPoints:
    """Tests for scrape_from_bytes/stream/file."""

    def test_from_bytes(self):
        """Test running a scraper on bytes."""
        assert len(scrape_from_bytes(XML, scrape)) == 2

    def test_from_bytes_with_options(self):
        """Test that options are passed through to the scraper."""
        assert len(scrape_from_bytes(XML, scrape_hrefs, chunk_size=4)) == 1

    def test_from_stream_leaves_stream_open(self):
        """Test that the caller keeps ownership of the stream."""
        stream = io.BytesIO(XML)
        links = scrape_from_stream(stream, scrape)
        assert len(links) == 2
        assert not stream.closed

    def test_from_file(self, tmp_path):
        """Test running a scraper on a file."""
        path = tmp_path / "doc.xml"
        path.write_bytes(XML)
        links = scrape_from_file(path, scrape)
        assert [link.url for link in links] == ["https://a.test.com", "https://text.test.com"]

    def test_missing_file(self, tmp_path):
        """Test that open failures are reported as I/O errors."""
        path = tmp_path / "missing.xml"
        with pytest.raises(ScrapeIOError) as exc_info:
            scrape_from_file(path, scrape)
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_parse_errors_stay_parse_errors(self, tmp_path):
        """Test that grammar errors are not turned into I/O errors."""
        path = tmp_path / "broken.xml"
        path.write_bytes(b"<root>")
        with pytest.raises(XmlParseError):
            scrape_from_file(path, scrape)


class TestFormatSelection:
    """Tests for detect_format and scrape_any."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("image.svg", "svg"),
            ("IMAGE.SVG", "svg"),
            ("feed.xml", "xml"),
            ("page.xhtml", "xml"),
            ("linkbase.xbrl", "xml"),
            ("notes.txt", "text"),
            ("README", "text"),
        ],
    )
    def test_detect_format(self, name, expected):
        """Test suffix-based detection."""
        assert detect_format(name) == expected

    def test_auto_format(self, tmp_path):
        """Test that scrape_any picks the scraper from the suffix."""
        svg = tmp_path / "a.svg"
        svg.write_bytes(b'<svg xmlns="http://www.w3.org/2000/svg"/>')
        txt = tmp_path / "a.txt"
        txt.write_text("https://t.test\n")
        xml = tmp_path / "a.xml"
        xml.write_bytes(XML)

        assert all(isinstance(link, SvgLink) for link in scrape_any(svg))
        assert all(isinstance(link, TextFileLink) for link in scrape_any(txt))
        assert all(isinstance(link, XmlLink) for link in scrape_any(xml))

    def test_explicit_format_and_xlink_options(self, tmp_path):
        """Test that config selects the scraper and its options."""
        path = tmp_path / "linkbase.xml"
        path.write_bytes(NESTED_XLINK)
        config = ScrapeConfig(format="xlink", xlink=XLinkConfig(end_matching="depth"))

        links = scrape_any(path, config)
        assert [link.url for link in links] == ["https://l.test/"]
        assert all(isinstance(link, XLinkLink) for link in links)

    def test_xlink_default_is_name_matching(self):
        """Test that name matching is the default for the xlink scraper."""
        from linkscraper.errors import LocatorOutsideOfExtendedError

        with pytest.raises(LocatorOutsideOfExtendedError):
            xlink.scrape(NESTED_XLINK)
