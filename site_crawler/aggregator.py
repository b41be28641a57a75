# File: site_crawler/aggregator.py
"""site_crawler.aggregator: builds the crawl report from the visit map."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, TypedDict

from site_crawler.crawler.models import ExtractedPageData, VisitMap


class PageInfo(TypedDict):
    """One row of the report: normalized URL and how often it was encountered."""

    url: str
    visits: int


class PageDataInfo(TypedDict):
    """Serialized :class:`ExtractedPageData`."""

    url: str
    h1: str
    first_paragraph: str
    outgoing_links: List[str]
    image_urls: List[str]


@dataclass(slots=True)
class CrawlReport:
    """Result of one crawl: visit counts plus the data extracted from fetched pages."""

    base_url: str
    pages: List[PageInfo] = field(default_factory=list)
    page_data: List[PageDataInfo] = field(default_factory=list)

    visits: VisitMap = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def to_dict(self) -> Dict[str, Any]:
        """Report as plain data, without the raw visit map."""
        output = {k: v for k, v in asdict(self).items() if k != "visits"}
        output["total_pages"] = self.total_pages
        return output

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _aggregate_pages(visits: VisitMap) -> List[PageInfo]:
    """Most-visited first; ties broken by URL."""
    ordered = sorted(visits.items(), key=lambda item: (-item[1], item[0]))
    return [{"url": url, "visits": count} for url, count in ordered]


def aggregate_results(
    base_url: str,
    visits: VisitMap,
    page_data: Mapping[str, ExtractedPageData] | None = None,
) -> CrawlReport:
    """Assemble a :class:`CrawlReport`; page data keeps the order pages were fetched in."""
    report = CrawlReport(base_url=base_url, visits=dict(visits))
    report.pages = _aggregate_pages(visits)
    if page_data:
        report.page_data = [data.to_dict() for data in page_data.values()]  # type: ignore[misc]
    return report
