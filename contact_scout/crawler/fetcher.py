# contact_scout/crawler/fetcher.py
"""
Fetcher module: a single GET with manual redirect following and a timeout.

No retries happen here; falling back to another URL is the crawler's job.
"""
from __future__ import annotations

import asyncio
from urllib.parse import urljoin

from aiohttp import ClientError, ClientSession

from contact_scout.config import CrawlConfig
from contact_scout.crawler.errors import (
    FetchTimeoutError,
    HTTPStatusError,
    RedirectLimitError,
    TransportError,
)
from contact_scout.crawler.models import PageData
from contact_scout.logger import logger


class Fetcher:
    """Fetches pages through a shared session, following up to ``max_redirects`` hops."""

    def __init__(self, session: ClientSession, config: CrawlConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its body.

        Raises a :class:`~contact_scout.crawler.errors.FetchError` subclass
        on timeout, transport failure, too many redirects or a bad status.
        """
        current = url
        chain: list[str] = []
        hops = 0
        while True:
            logger.info("Fetching: %s", current)
            try:
                async with self.session.get(current, allow_redirects=False) as resp:
                    status = resp.status
                    location = resp.headers.get("Location")
                    if 300 <= status < 400 and location:
                        try:
                            next_url = urljoin(current, location)
                        except ValueError as exc:
                            raise HTTPStatusError(status, current) from exc
                    elif 200 <= status < 300:
                        text = await resp.text(errors="replace")
                        return PageData(current, text, chain)
                    else:
                        raise HTTPStatusError(status, current)
            except asyncio.TimeoutError as exc:
                raise FetchTimeoutError(f"Timeout when fetching {current}", current) from exc
            except (ClientError, ValueError) as exc:
                raise TransportError(f"{type(exc).__name__} fetching {current}: {exc}", current) from exc

            hops += 1
            if hops > self.config.max_redirects:
                raise RedirectLimitError("Too many redirects", url)
            logger.info("Redirected to: %s", next_url)
            chain.append(current)
            current = next_url
