# site_crawler/__init__.py
"""
SiteCrawler package initializer.
Defines package version and exposes the crawl and extraction entry points.
"""
__version__ = "0.1.0"

from site_crawler.crawler.link_extractor import normalize_url
from site_crawler.crawler.models import ExtractedPageData
from site_crawler.parser.html_parser import extract_page_data
from site_crawler.scanner import crawl, start_crawl

__all__ = [
    "ExtractedPageData",
    "__version__",
    "crawl",
    "extract_page_data",
    "normalize_url",
    "start_crawl",
]
