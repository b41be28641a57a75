# === FILE: site_crawler/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import Dict, Iterator, List, Optional
from urllib.parse import urlsplit

from aiohttp import ClientSession, ClientTimeout

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.fetcher import Fetcher
from site_crawler.crawler.link_extractor import get_urls_from_html, normalize_url
from site_crawler.crawler.models import ExtractedPageData, VisitMap
from site_crawler.logger import LOGGER_NAME
from site_crawler.parser.html_parser import extract_page_data

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """Sequential single-host crawler that counts visits per normalized URL.

    Traversal is depth-first pre-order with one request in flight. An explicit
    stack of link iterators replaces recursion so deep sites cannot exhaust the
    call stack; the visiting order is the same as the recursive walk.
    """

    def __init__(self, config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.base_url: str = str(config.base_url)
        self.base_hostname: Optional[str] = urlsplit(self.base_url).hostname
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.page_data: Dict[str, ExtractedPageData] = {}
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> VisitMap:
        self.logger.info("Starting crawl: %s", self.base_url)
        start = time.monotonic()
        pages = await self.crawl_page(self.base_url, {})
        duration = time.monotonic() - start
        self.logger.info("Finished: %d unique pages in %.2f s", len(pages), duration)
        return pages

    async def crawl_page(self, current_url: str, pages: VisitMap) -> VisitMap:
        """Visit *current_url* and everything reachable from it, updating *pages* in place."""
        if self.fetcher is None:
            raise RuntimeError("Crawler used outside of 'async with'")
        stack: List[Iterator[str]] = [iter((current_url,))]
        while stack:
            url = next(stack[-1], None)
            if url is None:
                stack.pop()
                continue
            links = await self._visit(url, pages)
            if links:
                stack.append(iter(links))
        return pages

    async def _visit(self, current_url: str, pages: VisitMap) -> List[str]:
        """Book-keep one encounter of *current_url*; return the links to descend into."""
        if urlsplit(current_url).hostname != self.base_hostname:
            self.logger.debug("Out of scope: %s", current_url)
            return []

        key = normalize_url(current_url)
        if pages.get(key, 0) > 0:
            pages[key] += 1
            self.logger.debug("Seen %s (%d times)", key, pages[key])
            return []

        # marked before fetching: failed pages and self-links are never fetched twice
        pages[key] = 1

        try:
            html = await self.fetcher.get_html(current_url)  # type: ignore[union-attr]
        except Exception as exc:
            self.logger.warning("Failed %s: %s", current_url, exc)
            return []
        if not html:
            return []

        if self.config.collect_pages:
            self.page_data[key] = extract_page_data(html, current_url)
        return get_urls_from_html(html, self.base_url)
