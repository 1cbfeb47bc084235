"""URL matching for free text."""

from .protocols import UrlMatcher
from .urls import UrlMatch, find_urls

__all__ = [
    "UrlMatch",
    "UrlMatcher",
    "find_urls",
]
