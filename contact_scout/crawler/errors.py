"""
Errors raised while fetching pages and crawling a domain.
"""
from __future__ import annotations

from typing import List, Tuple


class FetchError(Exception):
    """A single page could not be fetched."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """DNS failure, refused or reset connection and similar."""


class FetchTimeoutError(FetchError):
    """The request did not complete within the configured timeout."""


class RedirectLimitError(FetchError):
    """Too many chained redirects."""


class HTTPStatusError(FetchError):
    """Response status outside 2xx, or a 3xx without a usable Location."""

    def __init__(self, status: int, url: str) -> None:
        super().__init__(f"HTTP {status} from {url}", url)
        self.status = status


class NoSiteFoundError(Exception):
    """Every candidate seed URL for a domain failed."""

    def __init__(self, domain: str, attempts: List[Tuple[str, FetchError]]) -> None:
        super().__init__(f"No valid site found for {domain}")
        self.domain = domain
        self.attempts = attempts
