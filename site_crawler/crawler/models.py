# site_crawler/crawler/models.py
"""
Data models for the SiteCrawler crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

#: normalized URL -> number of times the crawl encountered it
VisitMap = Dict[str, int]


@dataclass(frozen=True, slots=True)
class ExtractedPageData:
    """Structured data pulled out of one HTML page.

    Missing elements are represented by ``""`` or an empty tuple, never ``None``.
    """

    url: str
    h1: str = ""
    first_paragraph: str = ""
    outgoing_links: Tuple[str, ...] = field(default_factory=tuple)
    image_urls: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "h1": self.h1,
            "first_paragraph": self.first_paragraph,
            "outgoing_links": list(self.outgoing_links),
            "image_urls": list(self.image_urls),
        }
