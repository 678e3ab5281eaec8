# sitemapper/errors.py
"""
Exception hierarchy for SiteMapper.

Link rejections are raised by the normalizer and never leave the crawler.
Fetch errors are contained to the page that failed, unless the crawl runs
with ``fail_fast``; then they surface as :class:`CrawlAborted`.
"""
from __future__ import annotations

from typing import Optional

__all__ = (
    "SitemapperError",
    "LinkRejected",
    "MalformedTarget",
    "UnsupportedScheme",
    "CrossDomainTarget",
    "EmptyPath",
    "RelativeDotTarget",
    "FetchError",
    "HTTPStatusError",
    "TransportError",
    "CrawlAborted",
)


class SitemapperError(Exception):
    """Base class for all SiteMapper errors."""


class LinkRejected(SitemapperError):
    """A link target is not a page of the crawled site."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"{reason}: {target!r}")
        self.target = target
        self.reason = reason


class MalformedTarget(LinkRejected):
    def __init__(self, target: str) -> None:
        super().__init__(target, "malformed link target")


class UnsupportedScheme(LinkRejected):
    def __init__(self, target: str, scheme: str) -> None:
        super().__init__(target, f"unsupported scheme {scheme!r}")
        self.scheme = scheme


class CrossDomainTarget(LinkRejected):
    def __init__(self, target: str, host: str) -> None:
        super().__init__(target, f"link to other host {host!r}")
        self.host = host


class EmptyPath(LinkRejected):
    def __init__(self, target: str) -> None:
        super().__init__(target, "empty path")


class RelativeDotTarget(LinkRejected):
    def __init__(self, target: str) -> None:
        super().__init__(target, "dot-relative link")


class FetchError(SitemapperError):
    """A page could not be fetched."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class HTTPStatusError(FetchError):
    """The server answered with a non-success status."""

    def __init__(self, path: str, status: int) -> None:
        super().__init__(path, f"HTTP {status}")
        self.status = status


class TransportError(FetchError):
    """Network failure or timeout before a response was received."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, reason)
        self.reason = reason


class CrawlAborted(SitemapperError):
    """The crawl did not run to completion; no sitemap is available."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
