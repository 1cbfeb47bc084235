"""Regex-based URL matcher."""

import re
from dataclasses import dataclass

# scheme://rest, stopping at whitespace, angle brackets, quotes and backticks
_URL_RE = re.compile(r"(?<![A-Za-z0-9+.-])[A-Za-z][A-Za-z0-9+.-]*://[^\s<>\"'`]+")

_TRAILING_PUNCTUATION = ".,:;!?"
_BRACKETS = {")": "(", "]": "[", "}": "{"}


@dataclass(frozen=True)
class UrlMatch:
    """A URL found in a piece of text."""

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def __str__(self) -> str:
        return self.text


def _trim(candidate: str) -> str:
    """Strip trailing punctuation and unbalanced closing brackets."""
    while candidate:
        last = candidate[-1]
        if last in _TRAILING_PUNCTUATION:
            candidate = candidate[:-1]
        elif last in _BRACKETS and candidate.count(last) > candidate.count(_BRACKETS[last]):
            candidate = candidate[:-1]
        else:
            break
    return candidate


def find_urls(text: str) -> list[UrlMatch]:
    """
    Find every URL embedded in text.

    A URL needs an explicit scheme followed by ``://``; bare domains and
    e-mail addresses are not reported.

    Args:
        text: Text to scan

    Returns:
        Matches in text order
    """
    matches: list[UrlMatch] = []
    for match in _URL_RE.finditer(text):
        candidate = _trim(match.group(0))
        scheme_end = candidate.find("://") + 3
        if len(candidate) <= scheme_end:
            continue
        matches.append(UrlMatch(candidate, match.start()))
    return matches
