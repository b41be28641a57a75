# === FILE: site_crawler/scanner.py ===
"""
Entry points that run a crawl end to end.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from site_crawler.aggregator import CrawlReport, aggregate_results
from site_crawler.config import DEFAULT_USER_AGENT, CrawlerConfig
from site_crawler.crawler.crawler import AsyncCrawler
from site_crawler.crawler.models import VisitMap


async def start_crawl(cfg: CrawlerConfig) -> CrawlReport:
    """
    Run the crawler inside its session context and aggregate the result.

    Parameters
    ----------
    cfg : CrawlerConfig
        Crawl configuration.

    Returns
    -------
    CrawlReport
        Visit counts and, when ``cfg.collect_pages`` is set, extracted page data.
    """
    async with AsyncCrawler(cfg) as crawler:
        visits = await crawler.crawl()
    return aggregate_results(crawler.base_url, visits, crawler.page_data)


def crawl(
    base_url: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: Optional[float] = None,
) -> VisitMap:
    """Crawl *base_url* and return the map of normalized URL -> visit count.

    Raises pydantic.ValidationError when *base_url* is not a valid http(s) URL.
    """
    cfg = CrawlerConfig(base_url=base_url, user_agent=user_agent, timeout=timeout, collect_pages=False)
    return asyncio.run(start_crawl(cfg)).visits


__all__ = ["crawl", "start_crawl"]
