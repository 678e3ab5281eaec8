# sitemapper/crawler/normalizer.py
"""
URL normalization: turns raw href values into canonical in-site paths.
"""
from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

from sitemapper.errors import (
    CrossDomainTarget,
    EmptyPath,
    MalformedTarget,
    RelativeDotTarget,
    UnsupportedScheme,
)

__all__ = ("normalize", "strip_trailing_slash", "host_of")

_PAGE_SCHEMES = ("http", "https")


def strip_trailing_slash(path: str) -> str:
    """Drop one trailing '/' from paths longer than one character."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def host_of(parts: SplitResult) -> str:
    """
    Host (with port, if any) of a parsed reference, lower-cased, no userinfo.

    IPv6 literals keep their brackets; an invalid port raises ValueError.
    """
    host = parts.netloc.rpartition("@")[2].lower()
    if parts.port is None:
        host = host.removesuffix(":")
    return host


def normalize(domain_host: str, current_path: str, raw_target: str) -> str:
    """
    Canonical path of *raw_target* found on *current_path*, or raise LinkRejected.

    Absolute paths are kept, dot-relative ones are refused, and anything else
    is appended to the current path.
    """
    try:
        parts = urlsplit(raw_target.strip())
        host = host_of(parts)
    except ValueError as exc:
        raise MalformedTarget(raw_target) from exc

    if parts.scheme and parts.scheme.lower() not in _PAGE_SCHEMES:
        raise UnsupportedScheme(raw_target, parts.scheme)
    if host and host != domain_host.lower():
        raise CrossDomainTarget(raw_target, host)

    path = parts.path
    if not path:
        raise EmptyPath(raw_target)
    if path.startswith("/"):
        return strip_trailing_slash(path)
    if path.startswith("."):
        raise RelativeDotTarget(raw_target)

    base = current_path if current_path.endswith("/") else current_path + "/"
    return strip_trailing_slash(base + path)
