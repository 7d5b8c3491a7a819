# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web

from contact_scout.config import CrawlConfig
from contact_scout.parser.extractor import Extractor

#: small vocabulary used instead of the packaged one
VOCABULARY = ("joinery", "construction", "hospitality", "real estate", "tech", " ai")


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


@pytest.fixture()
def vocabulary() -> tuple[str, ...]:
    return VOCABULARY


@pytest.fixture()
def vocabulary_file(tmp_path) -> Path:
    """
    Create a temporary industries wordlist.
    """
    path = tmp_path / "industries.txt"
    path.write_text("# comment\nJoinery\n\n ai\nconstruction\njoinery\n", encoding="utf-8")
    return path


@pytest.fixture()
def basic_config() -> CrawlConfig:
    """
    Return a basic valid CrawlConfig for crawler tests.
    """
    return CrawlConfig(timeout=2.0)


@pytest.fixture()
def extractor(basic_config) -> Extractor:
    return Extractor(basic_config, vocabulary=VOCABULARY)


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """Start aiohttp apps on free ports; each call returns the ``host:port`` domain."""
    runners: list[web.AppRunner] = []

    async def _start(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"127.0.0.1:{port}"

    try:
        yield _start
    finally:
        for runner in runners:
            await runner.cleanup()
