"""Protocol definitions for URL matching."""

from collections.abc import Sequence
from typing import Protocol

from .urls import UrlMatch


class UrlMatcher(Protocol):
    """
    Protocol for finding URLs embedded in free text.

    Implementations must be pure: the same text always yields the same
    matches, in text order.
    """

    def __call__(self, text: str) -> Sequence[UrlMatch]:
        """
        Find URLs in text.

        Args:
            text: Any string (attribute value, comment, character data)

        Returns:
            Matches in the order they appear; empty when there are none
        """
        ...
