# === FILE: contact_scout/parser/extractor.py ===
"""Contact extraction from a single HTML page.

:class:`Extractor` turns markup into an
:class:`~contact_scout.aggregator.ExtractionRecord`:

* title — ``og:site_name``, then ``application-name``, then ``<title>``.
* emails / phones — recognizers run over the visible text plus every
  ``mailto:``/``tel:`` href, so contact links hidden behind icons count.
* addresses — see :mod:`contact_scout.parser.addresses`.
* industries — vocabulary hits in the ``keywords`` and description metas.

Script, style and noscript content is removed before any text heuristic runs.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from contact_scout.aggregator import ExtractionRecord
from contact_scout.config import CrawlConfig, load_vocabulary
from contact_scout.parser.addresses import find_addresses
from contact_scout.parser.contacts import contact_trailer, find_emails, find_phones

__all__: Sequence[str] = ("Extractor", "match_industries")


def _meta_content(soup: BeautifulSoup, attr: str, value: str) -> str:
    """Content of the first ``<meta attr=value>`` (attribute value compared case-insensitively)."""
    for tag in soup.find_all("meta"):
        if not isinstance(tag, Tag):
            continue
        found = tag.get(attr)
        if isinstance(found, str) and found.strip().lower() == value:
            content = tag.get("content")
            if isinstance(content, str):
                return content.strip()
    return ""


def _title(soup: BeautifulSoup) -> str:
    for candidate in (
        _meta_content(soup, "property", "og:site_name"),
        _meta_content(soup, "name", "application-name"),
    ):
        if candidate:
            return candidate
    title_tag = soup.find("title")
    return title_tag.get_text(strip=True) if title_tag else ""


def match_industries(vocabulary: Sequence[str], keywords: str, description: str) -> set[str]:
    """Vocabulary entries equal to a keyword token or contained in the description."""
    tokens = {k.strip() for k in keywords.lower().split(",") if k.strip()}
    description = description.lower()
    by_keyword = {word for word in vocabulary if word in tokens}
    by_description = {word for word in vocabulary if description and word in description}
    return by_keyword | by_description


class Extractor:
    """Builds per-page extraction records; the vocabulary is loaded once."""

    def __init__(self, config: CrawlConfig, vocabulary: Optional[Sequence[str]] = None) -> None:
        self.config = config
        self.vocabulary = tuple(
            w.lower() for w in (vocabulary if vocabulary is not None else load_vocabulary(config))
        )

    def extract(self, html: str, domain: str) -> ExtractionRecord:
        soup = BeautifulSoup(html, "html.parser")
        title = _title(soup)

        hrefs = [t["href"] for t in soup.find_all(href=True) if isinstance(t.get("href"), str)]
        keywords = _meta_content(soup, "name", "keywords")
        description = _meta_content(soup, "name", "description") or _meta_content(
            soup, "property", "og:description"
        )

        for element in soup(["script", "style", "noscript"]):
            element.decompose()

        body = soup.body or soup
        text = body.get_text(" ", strip=True) + "\n" + contact_trailer(hrefs)

        return ExtractionRecord(
            domain=domain,
            title=title,
            emails=find_emails(text, self.config.ignored_email_domains),
            phones=find_phones(text, self.config.phone_region),
            addresses=set(find_addresses(soup, self.config.address_max_length)),
            industries=match_industries(self.vocabulary, keywords, description),
        )
