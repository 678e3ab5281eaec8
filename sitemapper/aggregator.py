# File: sitemapper/aggregator.py
"""sitemapper.aggregator: turns a finished crawl into a serializable report."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict

from sitemapper.crawler.models import CrawlResult, PageNode
from sitemapper.logger import logger


class PageInfo(TypedDict):
    """One page of the sitemap."""

    path: str
    parent: Optional[str]
    depth: int
    children: List[str]


class FailureInfo(TypedDict):
    """A page that was discovered but could not be fetched."""

    path: str
    error: str


@dataclass(slots=True)
class SitemapReport:
    """Crawl results: pages in sitemap order, failures and timing."""

    domain: str
    pages: List[PageInfo] = field(default_factory=list)
    failures: List[FailureInfo] = field(default_factory=list)
    duration: float = 0.0

    root: Optional[PageNode] = field(default=None, repr=False)

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report, without the node tree."""
        output = {
            "domain": self.domain,
            "pages": self.pages,
            "failures": self.failures,
            "duration": self.duration,
            "tree": self.tree(),
        }
        return json.dumps(output, ensure_ascii=False, indent=2 if pretty else None)

    def tree(self) -> Dict[str, Any]:
        """Nested ``{"path", "children"}`` mapping of the crawled tree."""
        if self.root is None:
            return {}
        return _subtree(self.root)


def _subtree(node: PageNode) -> Dict[str, Any]:
    return {"path": node.path, "children": [_subtree(child) for child in node.children]}


def _aggregate_pages(root: PageNode) -> List[PageInfo]:
    pages: List[PageInfo] = []
    for node in root.walk():
        parent = node.parent
        pages.append(
            {
                "path": node.path,
                "parent": parent.path if parent is not None else None,
                "depth": node.depth,
                "children": [child.path for child in node.children],
            }
        )
    return pages


def aggregate_results(domain: str, result: CrawlResult) -> SitemapReport:
    """Collect all parts of the report into a SitemapReport."""
    report = SitemapReport(domain=domain, duration=round(result.duration, 3), root=result.root)
    report.pages = _aggregate_pages(result.root)
    report.failures = [{"path": path, "error": str(exc)} for path, exc in result.failures.items()]
    logger.debug("Aggregated %d pages, %d failures", len(report.pages), len(report.failures))
    return report
