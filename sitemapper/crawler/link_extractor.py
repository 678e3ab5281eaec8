# sitemapper/crawler/link_extractor.py
"""
Link extraction for SiteMapper.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup, SoupStrainer
from bs4.element import Tag

__all__ = ("LinkExtractor", "extract_links")

LinkExtractor = Callable[[Union[bytes, str]], Iterable[str]]

# parse only <a> tags
_ANCHORS = SoupStrainer("a")

logger = logging.getLogger("SiteMapper")


def extract_links(content: Union[bytes, str]) -> Iterator[str]:
    """
    Yield the href of every anchor in *content*, verbatim and in document order.

    Broken markup is skipped over by the parser; a document the parser
    refuses altogether yields no links. Anchors without an href are ignored.
    Each call parses the content anew.
    """
    if not content:
        return
    try:
        soup = BeautifulSoup(content, "html.parser", parse_only=_ANCHORS)
    except ParserRejectedMarkup as exc:
        logger.debug("Markup rejected by the parser, no links taken: %s", exc)
        return
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if isinstance(href, str):
            yield href
