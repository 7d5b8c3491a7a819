"""contact_scout.utils: Утилиты для доменов, стартовых URL, словарей и дедупликации."""

from __future__ import annotations

from pathlib import Path
from typing import Collection, List, Sequence, Union
from urllib.parse import urlparse, urlunparse

from contact_scout.logger import logger

__all__: Sequence[str] = (
    "domain_from_email",
    "candidate_urls",
    "normalize_url",
    "read_wordlist",
    "remove_duplicates",
)


def domain_from_email(email: str) -> str:
    """Возвращает часть адреса после ``@`` без проверки корректности адреса."""
    _, _, domain = email.partition("@")
    return domain.strip()


def candidate_urls(domain: str, templates: Sequence[str]) -> List[str]:
    """Подставляет домен в шаблоны, сохраняя порядок перебора."""
    return [template.format(domain=domain) for template in templates]


def normalize_url(url: str) -> str:
    """Нормализует URL для множества посещённых: регистр схемы и хоста, без фрагмента."""
    parsed = urlparse(url.strip())
    path = parsed.path or "/"
    normalized = urlunparse(
        (parsed.scheme.lower(), parsed.netloc.lower(), path, parsed.params, parsed.query, "")
    )
    return normalized


def read_wordlist(path: Union[str, Path], *, strip: bool = True) -> List[str]:
    """Читает wordlist, пропуская пустые строки и комментарии ``#``.

    With ``strip=False`` only line endings are removed, so entries keep
    meaningful leading spaces.
    """
    p = Path(path)
    if not p.exists():
        logger.error("Wordlist not found: %s", p)
        raise FileNotFoundError(f"Wordlist file not found: {p}")
    words: List[str] = []
    for line in p.read_text(encoding="utf-8").splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        words.append(line.strip() if strip else line)
    logger.debug("Loaded %d entries from wordlist %s", len(words), p)
    return words


def remove_duplicates(items: Collection[str]) -> List[str]:
    """Удаляет дубликаты, сохраняя порядок."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicates", removed)
    return unique
