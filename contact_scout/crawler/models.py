"""
Data models for the ContactScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Set

from contact_scout.utils import normalize_url


@dataclass(slots=True)
class PageData:
    """Holds the final (post-redirect) URL and decoded body of a fetched page."""

    url: str
    content: str
    redirects: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CrawlState:
    """Visited URLs and the page budget for the crawl of one domain."""

    max_pages: int = 100
    visited: Set[str] = field(default_factory=set)

    @property
    def remaining(self) -> int:
        return max(0, self.max_pages - len(self.visited))

    def is_visited(self, url: str) -> bool:
        return normalize_url(url) in self.visited

    def mark(self, url: str) -> bool:
        """Mark *url* visited. Returns False if it was already there or the budget is spent."""
        key = normalize_url(url)
        if key in self.visited or not self.remaining:
            return False
        self.visited.add(key)
        return True

    def mark_all(self, urls: Iterable[str]) -> List[str]:
        """Mark every URL in order; returns the ones that were newly admitted."""
        return [u for u in urls if self.mark(u)]
