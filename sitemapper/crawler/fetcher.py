# sitemapper/crawler/fetcher.py
"""
Fetcher module: HTTP GET of site pages with per-request timeout and retry/backoff.
"""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Optional, Protocol, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from sitemapper.config import CrawlerConfig
from sitemapper.errors import HTTPStatusError, TransportError

__all__ = ("PageFetcher", "HttpFetcher")


class PageFetcher(Protocol):
    """Anything that can return the raw content of a page of the crawled site."""

    async def fetch(self, domain_host: str, path: str) -> bytes:
        """Return the body of ``path`` on ``domain_host`` or raise FetchError."""
        ...


class HttpFetcher:
    """aiohttp based fetcher; use as an async context manager to own the session."""

    _RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("SiteMapper")

    async def __aenter__(self) -> HttpFetcher:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, domain_host: str, path: str) -> bytes:
        """
        GET ``{scheme}://{domain_host}{path}``.

        5xx and 429 answers and transport failures are retried ``retry_times``
        times with exponential backoff. Other non-success statuses raise
        HTTPStatusError at once. Non-HTML bodies come back empty.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        url = f"{self.config.scheme}://{domain_host}{path}"
        retries = self.config.retry_times
        attempts = 0
        while True:
            try:
                async with self.session.get(url) as resp:
                    status = resp.status
                    if status not in self._RETRY_STATUS or attempts >= retries:
                        if not 200 <= status < 300:
                            raise HTTPStatusError(path, status)
                        mime = resp.headers.get("Content-Type", "text/html").split(";", 1)[0].strip().lower()
                        if "html" not in mime:
                            self.logger.debug("Not following links of %s (%s)", path, mime)
                            return b""
                        return await resp.read()
                    reason = f"HTTP {status}"
            except (ClientError, asyncio.TimeoutError) as exc:
                if attempts >= retries:
                    raise TransportError(path, str(exc) or type(exc).__name__) from exc
                reason = str(exc) or type(exc).__name__
            attempts += 1
            delay = self._backoff(attempts)
            self.logger.debug("Retry %d/%d for %s after %.2f s (%s)", attempts, retries, path, delay, reason)
            await asyncio.sleep(delay)

    def _backoff(self, attempt: int) -> float:
        base = self.config.backoff
        return min(60.0, base * 2 ** (attempt - 1) + random.random() * base)
