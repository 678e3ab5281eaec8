# === FILE: sitemapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable, List, Optional

from sitemapper.config import CrawlerConfig
from sitemapper.crawler.fetcher import HttpFetcher, PageFetcher
from sitemapper.crawler.link_extractor import LinkExtractor, extract_links
from sitemapper.crawler.models import CrawlResult, CrawlState, PageNode
from sitemapper.crawler.normalizer import normalize, strip_trailing_slash
from sitemapper.errors import CrawlAborted, FetchError, LinkRejected

__all__ = ("SiteCrawler", "crawl")

ProgressCallback = Callable[[str], None]


class SiteCrawler:
    """
    Breadth-first crawler building the discovery tree of one site.

    A pool of ``config.concurrency`` workers expands frontier nodes. The first
    page to link to a path becomes its parent; later links to it are dropped.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        fetcher: PageFetcher,
        extract_links: LinkExtractor = extract_links,
        on_fetch: Optional[ProgressCallback] = None,
    ) -> None:
        self.config = config
        self.domain = config.domain
        self.fetcher = fetcher
        self.extract_links = extract_links
        self.on_fetch = on_fetch
        self.logger = logging.getLogger("SiteMapper")

    async def crawl(self, start_path: Optional[str] = None) -> CrawlResult:
        """Crawl from *start_path* until no page is queued or being expanded."""
        start_path = strip_trailing_slash(start_path or self.config.start_path)
        self.logger.info("Crawl started: %s://%s%s", self.config.scheme, self.domain, start_path)
        start = time.monotonic()
        state = CrawlState(start_path, lifo=self.config.frontier == "lifo")

        workers = [asyncio.create_task(self._worker(state)) for _ in range(self.config.concurrency)]
        drained = asyncio.create_task(state.frontier.join())
        tasks: List[asyncio.Task[Any]] = [drained, *workers]
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            # workers never return; one being done means it raised
            for task in done:
                if task is not drained:
                    task.result()
        except BaseException as exc:
            self.logger.error("Crawl aborted after %d pages: %r", len(state), exc)
            raise
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d pages in %.2f s (%.2f pages/s)",
            len(state), duration, len(state) / duration if duration else 0,
        )
        if state.failures:
            self.logger.info("Pages that could not be fetched: %d", len(state.failures))
        return CrawlResult(state.root, len(state), dict(state.failures), duration)

    async def _worker(self, state: CrawlState) -> None:
        while True:
            node = await state.frontier.get()
            try:
                await self._expand(state, node)
            finally:
                state.frontier.task_done()

    async def _expand(self, state: CrawlState, node: PageNode) -> None:
        """Fetch *node* and attach every newly discovered page as its child."""
        if self.on_fetch is not None:
            self.on_fetch(node.path)
        self.logger.debug("Fetching %s", node.path)
        try:
            content = await self.fetcher.fetch(self.domain, node.path)
        except FetchError as exc:
            if self.config.fail_fast:
                raise CrawlAborted(f"could not fetch {node.path}: {exc}", exc) from exc
            self.logger.warning("Failed %s: %s", node.path, exc)
            state.record_failure(node, exc)
            return

        for target in self.extract_links(content):
            try:
                path = normalize(self.domain, node.path, target)
            except LinkRejected as exc:
                self.logger.debug("Skipped link on %s: %s", node.path, exc)
                continue
            await state.register(node, path)


async def crawl(
    domain_host: str,
    start_path: str = "/",
    fetcher: Optional[PageFetcher] = None,
    extract_links: LinkExtractor = extract_links,
    **settings: Any,
) -> PageNode:
    """
    Crawl *domain_host* from *start_path* and return the root of the tree.

    Without a *fetcher*, pages are fetched over HTTP; *settings* are further
    CrawlerConfig fields.
    """
    config = CrawlerConfig(domain=domain_host, start_path=start_path, **settings)
    if fetcher is not None:
        result = await SiteCrawler(config, fetcher, extract_links).crawl()
        return result.root
    async with HttpFetcher(config) as http:
        result = await SiteCrawler(config, http, extract_links).crawl()
    return result.root
