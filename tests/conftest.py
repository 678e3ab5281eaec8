# File: tests/conftest.py
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Dict, List, Union

import pytest
from aiohttp import web

from sitemapper.config import CrawlerConfig
from sitemapper.errors import HTTPStatusError

Page = Union[str, Exception]


def links(*hrefs: str) -> str:
    """Minimal HTML page with one anchor per href."""
    anchors = "".join(f'<a href="{href}">{href}</a>' for href in hrefs)
    return f"<html><body>{anchors}</body></html>"


class FakeFetcher:
    """In-memory site: path -> HTML (or exception to raise). Unknown paths are 404."""

    def __init__(self, pages: Dict[str, Page], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: List[str] = []

    async def fetch(self, domain_host: str, path: str) -> bytes:
        self.calls.append(path)
        if self.delay:
            await asyncio.sleep(self.delay)
        page = self.pages.get(path)
        if page is None:
            raise HTTPStatusError(path, 404)
        if isinstance(page, Exception):
            raise page
        return page.encode("utf-8")


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield its host:port, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def sequential_config() -> CrawlerConfig:
    """One worker, FIFO frontier: the reference breadth-first behaviour."""
    return CrawlerConfig(domain="example.com", concurrency=1)


@pytest.fixture()
def diamond_site() -> Dict[str, Page]:
    """
    /  -> /a, /b
    /a -> /c
    /b -> /c, /d
    /c -> /d
    """
    return {
        "/": links("/a", "/b"),
        "/a": links("/c"),
        "/b": links("/c", "/d"),
        "/c": links("/d"),
        "/d": links(),
    }
