"""Email and phone recognition over the text view of a page."""
from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from urllib.parse import unquote

from phonenumbers import Leniency, PhoneNumberMatcher

__all__: Sequence[str] = ("contact_trailer", "find_emails", "find_phones")

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_IMAGE_RE = re.compile(r"\.(?:png|jpe?g|gif|webp|bmp|svg)$", re.IGNORECASE)


def contact_trailer(hrefs: Iterable[str]) -> str:
    """Turn ``mailto:``/``tel:`` hrefs into plain text the recognizers can scan."""
    values: list[str] = []
    for href in hrefs:
        scheme, _, rest = href.strip().partition(":")
        if scheme.lower() not in ("mailto", "tel") or not rest:
            continue
        value = unquote(rest.split("?", 1)[0]).strip()
        if value:
            values.append(value)
    return "\n".join(values)


def _ignored(address: str, ignored_domains: Sequence[str]) -> bool:
    local, _, host = address.rpartition("@")
    if _IMAGE_RE.search(address) or _IMAGE_RE.search(local):
        return True
    return any(host == d or host.endswith("." + d) for d in ignored_domains)


def find_emails(text: str, ignored_domains: Sequence[str] = ("sentry.io",)) -> set[str]:
    """
    Lower-cased email addresses found in *text*.

    Addresses on tracking domains and image file names that merely look
    like addresses (``logo@2x.png``) are dropped.
    """
    found = {m.group(0).lower() for m in EMAIL_RE.finditer(text)}
    return {e for e in found if not _ignored(e, ignored_domains)}


def find_phones(text: str, region: str = "GB") -> set[str]:
    """Phone numbers as written in *text*, recognised by ``phonenumbers``."""
    matcher = PhoneNumberMatcher(text, region, leniency=Leniency.POSSIBLE)
    return {match.raw_string.strip() for match in matcher}
