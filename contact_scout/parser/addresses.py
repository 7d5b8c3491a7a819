"""Heuristic postal-address detection (UK postcodes and street lines)."""
from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup

from contact_scout.utils import remove_duplicates

ADDRESS_TAGS = ["p", "a", "span", "address", "li", "div", "h1", "h2", "h3", "h4", "h5", "h6"]

POSTCODE_RE = re.compile(r"\b[A-Z]{1,2}\d{1,2}[A-Z]?\s?\d[A-Z]{2}\b", re.IGNORECASE)
STREET_RE = re.compile(
    r"\b\d+[A-Z]?(?:\s+[A-Z][\w'’.-]*)*?\s+"
    r"(?:Street|St|Road|Rd|Avenue|Ave|Drive|Dr|Lane|Ln|Estate|Close|Court|Crescent|Way"
    r"|Place|Square|Village)\b",
    re.IGNORECASE,
)
_CURRENCY_RE = re.compile(r"[£$€]")


def clean_address(text: str) -> str:
    """Collapse whitespace and normalize spacing around commas."""
    text = re.sub(r"\s+", " ", text)
    text = re.sub(r"\s*,\s*", ", ", text)
    return text.strip(" ,")


def match_address(text: str, max_length: int = 160) -> Optional[str]:
    """
    Return an address for one element's text, or None.

    Postcode plus street yields the whole cleaned text; a postcode alone
    yields just the postcode, upper-cased. A street alone is not enough.
    """
    text = text.strip()
    if not text or len(text) > max_length:
        return None
    if "@" in text or _CURRENCY_RE.search(text):
        return None
    postcode = POSTCODE_RE.search(text)
    if postcode is None:
        return None
    if STREET_RE.search(text):
        return clean_address(text)
    return postcode.group(0).upper()


def find_addresses(soup: BeautifulSoup, max_length: int = 160) -> List[str]:
    """Run :func:`match_address` over every candidate element, deduplicated."""
    found: List[str] = []
    for element in soup.find_all(ADDRESS_TAGS):
        address = match_address(element.get_text(" ", strip=True), max_length)
        if address:
            found.append(address)
    return remove_duplicates(found)
