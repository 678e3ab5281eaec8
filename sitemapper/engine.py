# File: sitemapper/engine.py
"""sitemapper.engine: orchestration layer that runs a crawl for the CLI and tests."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from sitemapper.config import CrawlerConfig
from sitemapper.crawler.crawler import SiteCrawler
from sitemapper.crawler.fetcher import HttpFetcher
from sitemapper.crawler.models import CrawlResult
from sitemapper.errors import CrawlAborted
from sitemapper.logger import logger

__all__ = ["start_crawl"]


async def start_crawl(
    config: CrawlerConfig,
    on_fetch: Optional[Callable[[str], None]] = None,
) -> CrawlResult:
    """Crawl the configured site over HTTP; a crawl_timeout overrun raises CrawlAborted."""
    logger.info("Starting crawl of %s", config.domain)

    async def _runner() -> CrawlResult:
        async with HttpFetcher(config) as fetcher:
            return await SiteCrawler(config, fetcher, on_fetch=on_fetch).crawl()

    try:
        return await asyncio.wait_for(_runner(), timeout=config.crawl_timeout)
    except asyncio.TimeoutError as exc:
        logger.error("Crawl did not finish within %s seconds", config.crawl_timeout)
        raise CrawlAborted(f"crawl did not finish within {config.crawl_timeout} seconds", exc) from exc
