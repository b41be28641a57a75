# === FILE: site_crawler/parser/html_parser.py ===
"""HTML extraction helpers for SiteCrawler.

Every helper takes raw markup and re-parses it, so each field can fail on its
own without taking the others down:

* h1             : text of the first ``<h1>`` or ``""``.
* first_paragraph: first ``<p>`` inside ``<main>``, otherwise the first
  ``<p>`` of the document, otherwise ``""``.
* outgoing_links : absolute URLs of ``<a href="…">`` in document order.
* image_urls     : absolute URLs of ``<img src="…">`` in document order.
"""
from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup

from site_crawler.crawler.link_extractor import get_images_from_html, get_urls_from_html
from site_crawler.crawler.models import ExtractedPageData
from site_crawler.logger import logger

__all__: Sequence[str] = (
    "get_h1_from_html",
    "get_first_paragraph_from_html",
    "extract_page_data",
)


def get_h1_from_html(html: str) -> str:
    """Return the trimmed text of the first ``<h1>``, or ``""``."""
    try:
        soup = BeautifulSoup(html, "html.parser")
        h1 = soup.find("h1")
        return h1.get_text().strip() if h1 else ""
    except Exception as exc:
        logger.error("failed to extract h1: %s", exc)
        return ""


def get_first_paragraph_from_html(html: str) -> str:
    """Return the first paragraph, preferring the one inside ``<main>``.

    A ``<main>`` without paragraphs does not short-circuit: the search falls
    back to the whole document.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
        main = soup.find("main")
        p = main.find("p") if main else None
        if p is None:
            p = soup.find("p")
        return p.get_text().strip() if p else ""
    except Exception as exc:
        logger.error("failed to extract first paragraph: %s", exc)
        return ""


def extract_page_data(html: str, page_url: str) -> ExtractedPageData:
    """Build the :class:`ExtractedPageData` record for *html* served at *page_url*.

    Relative links and images resolve against *page_url*; the record keeps
    *page_url* verbatim. No network access.
    """
    return ExtractedPageData(
        url=page_url,
        h1=get_h1_from_html(html),
        first_paragraph=get_first_paragraph_from_html(html),
        outgoing_links=tuple(get_urls_from_html(html, page_url)),
        image_urls=tuple(get_images_from_html(html, page_url)),
    )
