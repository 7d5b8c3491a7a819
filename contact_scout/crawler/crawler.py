# === FILE: contact_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Sequence, Tuple

from aiohttp import ClientSession, ClientTimeout

from contact_scout.aggregator import ExtractionRecord, merge, summarize
from contact_scout.config import CrawlConfig
from contact_scout.crawler.errors import FetchError, NoSiteFoundError
from contact_scout.crawler.fetcher import Fetcher
from contact_scout.crawler.link_extractor import discover_links
from contact_scout.crawler.models import CrawlState
from contact_scout.logger import logger
from contact_scout.parser.extractor import Extractor
from contact_scout.utils import candidate_urls

__all__ = ("DomainCrawler",)


class DomainCrawler:
    """Находит сайт домена по шаблонам URL и собирает контакты со связанных страниц."""

    def __init__(self, config: CrawlConfig, extractor: Optional[Extractor] = None) -> None:
        self.config = config
        self.extractor = extractor or Extractor(config)
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.state: Optional[CrawlState] = None

    async def __aenter__(self) -> DomainCrawler:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers=self.config.headers,
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, domain: str) -> ExtractionRecord:
        """
        Try each candidate seed URL in order and return the merged record
        of the first one that can be fetched.

        Raises NoSiteFoundError when every candidate fails.
        """
        self._get_fetcher()
        logger.info("Scraping data for domain: %s", domain)
        start = time.monotonic()
        # one state per domain, shared by all candidates
        self.state = CrawlState(max_pages=self.config.max_pages)
        attempts: List[Tuple[str, FetchError]] = []
        for url in candidate_urls(domain, self.config.url_templates):
            try:
                record = await self._crawl_seed(url, domain, self.state)
            except FetchError as exc:
                logger.info("%s, trying next...", exc)
                attempts.append((url, exc))
                continue
            logger.info(
                "Done %s: %d pages in %.2f s (%s)",
                domain,
                len(self.state.visited),
                time.monotonic() - start,
                ", ".join(summarize(record)),
            )
            return record
        logger.error("No valid site found for %s", domain)
        raise NoSiteFoundError(domain, attempts)

    def _get_fetcher(self) -> Fetcher:
        if not self.fetcher:
            raise RuntimeError("Session not initialized")
        return self.fetcher

    async def _crawl_seed(self, url: str, domain: str, state: CrawlState) -> ExtractionRecord:
        page = await self._get_fetcher().fetch(url)
        state.mark(url)
        state.mark(page.url)
        seed = self.extractor.extract(page.content, domain)

        links = discover_links(page.content, page.url, domain, state)
        if not links:
            return seed
        # mark before fan-out so no URL is dispatched twice
        links = state.mark_all(links)
        logger.debug("Following %d links from %s", len(links), page.url)

        outcomes = await asyncio.gather(
            *(self._fetch_record(link, domain) for link in links),
            return_exceptions=True,
        )
        return merge(seed, self._contributions(links, outcomes, domain))

    async def _fetch_record(self, url: str, domain: str) -> ExtractionRecord:
        page = await self._get_fetcher().fetch(url)
        return self.extractor.extract(page.content, domain)

    @staticmethod
    def _contributions(
        links: Sequence[str], outcomes: Sequence[object], domain: str
    ) -> List[ExtractionRecord]:
        records: List[ExtractionRecord] = []
        for link, outcome in zip(links, outcomes):
            if isinstance(outcome, FetchError):
                logger.debug("Skipped %s: %s", link, outcome)
                records.append(ExtractionRecord.empty(domain))
            elif isinstance(outcome, Exception):
                logger.warning("Skipped %s: %s: %s", link, type(outcome).__name__, outcome)
                records.append(ExtractionRecord.empty(domain))
            elif isinstance(outcome, BaseException):
                # cancellation and interpreter exits are not page failures
                raise outcome
            else:
                records.append(outcome)  # type: ignore[arg-type]
        return records
