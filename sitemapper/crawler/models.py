# sitemapper/crawler/models.py
"""
Data models for the SiteMapper crawler.
"""
from __future__ import annotations

import asyncio
import weakref
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from sitemapper.errors import FetchError


@dataclass(slots=True, weakref_slot=True, eq=False)
class PageNode:
    """One discovered page: canonical path, owned children, weak link to its parent."""

    path: str
    _parent: Optional[weakref.ReferenceType[PageNode]] = field(default=None, repr=False)
    children: List[PageNode] = field(default_factory=list, repr=False)
    error: Optional[FetchError] = field(default=None, repr=False)

    @classmethod
    def create(cls, path: str, parent: Optional[PageNode] = None) -> PageNode:
        return cls(path, weakref.ref(parent) if parent is not None else None)

    @property
    def parent(self) -> Optional[PageNode]:
        return self._parent() if self._parent is not None else None

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    def add_child(self, child: PageNode) -> None:
        self.children.append(child)

    def ancestors(self) -> Iterator[PageNode]:
        """Yield the parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator[PageNode]:
        """Depth-first pre-order traversal of the subtree rooted here."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __str__(self) -> str:
        return self.path


class CrawlState:
    """
    Mutable state of a single crawl: visited index, frontier and failures.

    ``visited`` maps each canonical path to the node created for it and is
    written once per key. The tree owns the nodes; the index only looks
    them up.
    """

    def __init__(self, root_path: str, lifo: bool = False) -> None:
        self.frontier: asyncio.Queue[PageNode] = asyncio.LifoQueue() if lifo else asyncio.Queue()
        self.visited: Dict[str, PageNode] = {}
        self.failures: Dict[str, FetchError] = {}
        self._lock = asyncio.Lock()
        self.root = PageNode.create(root_path)
        self.visited[root_path] = self.root
        self.frontier.put_nowait(self.root)

    async def register(self, parent: PageNode, path: str) -> Optional[PageNode]:
        """
        Create, attach and enqueue a node for *path* unless it was seen before.

        Returns the new node, or None if another page already discovered it.
        """
        async with self._lock:
            if path in self.visited:
                return None
            child = PageNode.create(path, parent)
            self.visited[path] = child
            parent.add_child(child)
            self.frontier.put_nowait(child)
            return child

    def record_failure(self, node: PageNode, error: FetchError) -> None:
        node.error = error
        self.failures[node.path] = error

    def __len__(self) -> int:
        return len(self.visited)


@dataclass(slots=True)
class CrawlResult:
    """Finished crawl: the tree root plus bookkeeping for reports."""

    root: PageNode
    pages: int
    failures: Dict[str, FetchError] = field(default_factory=dict)
    duration: float = 0.0
