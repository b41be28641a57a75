# File: site_crawler/crawler/__init__.py
"""site_crawler.crawler: visit bookkeeping, fetching and link resolution."""

from .crawler import AsyncCrawler
from .fetcher import FetchError, Fetcher
from .link_extractor import InvalidURLError, normalize_url, resolve_url
from .models import ExtractedPageData, VisitMap

__all__ = [
    "AsyncCrawler",
    "ExtractedPageData",
    "FetchError",
    "Fetcher",
    "InvalidURLError",
    "VisitMap",
    "normalize_url",
    "resolve_url",
]
