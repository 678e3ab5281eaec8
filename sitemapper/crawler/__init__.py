# sitemapper/crawler/__init__.py
"""Traversal engine and its collaborators: fetcher, link extractor, normalizer."""
