# sitemapper/__init__.py
"""
SiteMapper package initializer.
Defines package version and exposes the crawl entry point.
The command line lives in :mod:`sitemapper.cli`.
"""
__version__ = "0.1.0"

from sitemapper.crawler.crawler import SiteCrawler, crawl  # noqa: E402

__all__ = ["__version__", "crawl", "SiteCrawler"]
