"""
Same-domain link discovery for ContactScout.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

from contact_scout.crawler.models import CrawlState
from contact_scout.utils import normalize_url, remove_duplicates

_SKIP_PREFIXES = ("mailto:", "tel:", "javascript:", "#")


def discover_links(
    html: str,
    base_url: str,
    domain: str,
    state: Optional[CrawlState] = None,
) -> List[str]:
    """
    Return absolute URLs of in-domain links found in *html*, in encounter order.

    Any element with an ``href`` counts. A link is in-domain when its raw
    href text contains *domain*. With *state*, already visited URLs are
    dropped and the result is cut to the remaining page budget.
    """
    soup = BeautifulSoup(html, "html.parser")
    links: List[str] = []
    for tag in soup.find_all(href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.lower().startswith(_SKIP_PREFIXES):
            continue
        if domain not in raw:
            continue
        try:
            absolute = normalize_url(urljoin(base_url, raw))
        except ValueError:
            # malformed href, e.g. an unbalanced IPv6 bracket
            continue
        if urlparse(absolute).scheme not in ("http", "https"):
            continue
        if state is not None and state.is_visited(absolute):
            continue
        links.append(absolute)

    links = remove_duplicates(links)
    if state is not None:
        links = links[: state.remaining]
    return links
