# File: contact_scout/aggregator.py
"""contact_scout.aggregator: Запись с извлечёнными контактами и её слияние по страницам."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Set

_COLLECTIONS = ("emails", "phones", "addresses", "industries")


@dataclass(slots=True)
class ExtractionRecord:
    """Контакты одной страницы или итог по всему домену."""

    domain: str
    title: str = ""
    emails: Set[str] = field(default_factory=set)
    phones: Set[str] = field(default_factory=set)
    addresses: Set[str] = field(default_factory=set)
    industries: Set[str] = field(default_factory=set)

    @classmethod
    def empty(cls, domain: str) -> ExtractionRecord:
        """Вклад страницы, которую не удалось загрузить."""
        return cls(domain=domain)

    def to_dict(self) -> Dict[str, Any]:
        """Словарь для сериализации; множества отдаются отсортированными списками."""
        data: Dict[str, Any] = {"domain": self.domain, "title": self.title}
        for name in _COLLECTIONS:
            data[name] = sorted(getattr(self, name))
        return data

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление записи."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def merge(seed: ExtractionRecord, pages: Iterable[ExtractionRecord]) -> ExtractionRecord:
    """Объединяет записи страниц с записью стартовой страницы.

    Коллекции объединяются как множества; домен и заголовок берутся
    только у стартовой страницы.
    """
    result = ExtractionRecord(
        domain=seed.domain,
        title=seed.title,
        emails=set(seed.emails),
        phones=set(seed.phones),
        addresses=set(seed.addresses),
        industries=set(seed.industries),
    )
    for page in pages:
        for name in _COLLECTIONS:
            getattr(result, name).update(getattr(page, name))
    return result


def summarize(record: ExtractionRecord) -> List[str]:
    """Короткие строки для лога: сколько чего найдено."""
    return [f"{name}={len(getattr(record, name))}" for name in _COLLECTIONS]
