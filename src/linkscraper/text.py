"""Line-oriented link scraping for plain-text files."""

import io
import logging
from collections.abc import Iterator
from typing import IO, Optional, Union

from .errors import ScrapeIOError
from .matching import UrlMatcher, find_urls
from .models.links import TextFileLink, TextPosition

logger = logging.getLogger(__name__)

TextSource = Union[bytes, bytearray, str, IO[bytes], IO[str]]


def _lines(source: TextSource) -> Iterator[str]:
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode("utf-8", errors="replace")
    if isinstance(source, str):
        yield from io.StringIO(source)
        return
    for line in source:
        yield line.decode("utf-8", errors="replace") if isinstance(line, bytes) else line


def scrape(source: TextSource, *, matcher: Optional[UrlMatcher] = None) -> list[TextFileLink]:
    """
    Scrape links from plain text, one line at a time.

    The column of each link is the offset of the match inside its line.

    Raises:
        ScrapeIOError: If the input stream cannot be read
    """
    find = matcher or find_urls
    collector: list[TextFileLink] = []
    try:
        for line_number, line in enumerate(_lines(source), start=1):
            collector.extend(
                TextFileLink(match.text, TextPosition(line_number, match.start)) for match in find(line)
            )
    except OSError as e:
        raise ScrapeIOError(f"Failed to read text input: {e}") from e

    logger.debug(f"Scraped {len(collector)} links from text")
    return collector
