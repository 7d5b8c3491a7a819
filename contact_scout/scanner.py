"""
Модуль-обёртка для функции запуска сбора контактов по email.
"""
from typing import Optional

from contact_scout.aggregator import ExtractionRecord
from contact_scout.config import CrawlConfig
from contact_scout.crawler.crawler import DomainCrawler
from contact_scout.utils import domain_from_email


async def start_scan(email: str, cfg: Optional[CrawlConfig] = None) -> ExtractionRecord:
    """
    Определяет домен по email, обходит его сайт и возвращает итоговую запись.

    Parameters
    ----------
    email : str
        Адрес, домен которого нужно исследовать.
    cfg : CrawlConfig, optional
        Конфигурация; по умолчанию используются значения CrawlConfig().

    Raises
    ------
    NoSiteFoundError
        Ни один из стартовых URL не ответил.
    """
    cfg = cfg or CrawlConfig()
    async with DomainCrawler(cfg) as crawler:
        return await crawler.crawl(domain_from_email(email))

__all__ = ["start_scan"]
