# File: sitemapper/sitemap.py
"""sitemapper.sitemap: plain-text rendering of a crawled page tree."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from sitemapper.crawler.models import PageNode

__all__ = ("iter_sitemap_lines", "render_sitemap")

INDENT = "   "


def iter_sitemap_lines(root: PageNode, indent: str = INDENT) -> Iterator[str]:
    """Yield one line per node, root first, children in pre-order below their parent."""
    stack: List[Tuple[PageNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node.path if depth == 0 else " " + indent * (depth - 1) + node.path
        stack.extend((child, depth + 1) for child in reversed(node.children))


def render_sitemap(root: PageNode, indent: str = INDENT) -> str:
    """Indented sitemap of the tree rooted at *root*."""
    return "\n".join(iter_sitemap_lines(root, indent))
