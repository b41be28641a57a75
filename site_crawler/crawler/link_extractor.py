# site_crawler/crawler/link_extractor.py
"""
Link extraction and URL normalization utilities for SiteCrawler.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_crawler.logger import logger

__all__ = (
    "InvalidURLError",
    "normalize_url",
    "resolve_url",
    "get_urls_from_html",
    "get_images_from_html",
)

_DEFAULT_PORTS = {"http": 80, "https": 443}


class InvalidURLError(ValueError):
    """Raised when a string cannot be parsed or resolved as an absolute URL."""


def _host(parsed: SplitResult) -> str:
    """Lower-case host with its non-default port, as it appears in the URL authority."""
    hostname = parsed.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    port = parsed.port
    if port is not None and port != _DEFAULT_PORTS.get(parsed.scheme.lower()):
        return f"{hostname}:{port}"
    return hostname


def _split(url: str) -> SplitResult:
    try:
        parsed = urlsplit(url)
        parsed.port  # validates the port component
    except ValueError as exc:
        raise InvalidURLError(f"invalid URL {url!r}: {exc}") from exc
    return parsed


def normalize_url(url: str) -> str:
    """
    Reduce an absolute URL to ``host + path``: scheme dropped, host lower-cased,
    one trailing slash removed. Query and fragment do not take part in the key.
    """
    parsed = _split(url)
    if not parsed.scheme or not parsed.hostname:
        raise InvalidURLError(f"invalid URL {url!r}: not an absolute URL")
    full_path = f"{_host(parsed)}{parsed.path}"
    if full_path.endswith("/"):
        full_path = full_path[:-1]
    return full_path


def resolve_url(reference: str, base_url: str) -> str:
    """
    Resolve *reference* (absolute or relative) against *base_url*.

    http(s) results get a lower-case scheme and host, the default port dropped
    and an empty path serialized as ``/``. Other schemes (``mailto:`` …) are
    returned as joined.
    """
    base = _split(base_url)
    if not base.scheme:
        raise InvalidURLError(f"base URL {base_url!r} is not absolute")
    try:
        joined = urljoin(base_url, reference.strip())
    except ValueError as exc:
        raise InvalidURLError(f"cannot resolve {reference!r} against {base_url}: {exc}") from exc
    parsed = _split(joined)
    scheme = parsed.scheme.lower()
    if not scheme:
        raise InvalidURLError(f"cannot resolve {reference!r} against {base_url}")
    if scheme not in _DEFAULT_PORTS:
        return joined

    if not parsed.hostname:
        raise InvalidURLError(f"invalid URL {joined!r}: missing host")
    userinfo, sep, _ = parsed.netloc.rpartition("@")
    netloc = f"{userinfo}{sep}{_host(parsed)}"
    return urlunsplit((scheme, netloc, parsed.path or "/", parsed.query, parsed.fragment))


def _collect(html: str, base_url: str, tag_name: str, attr: str) -> List[str]:
    """Resolve ``attr`` of every ``tag_name`` element, in document order."""
    urls: List[str] = []
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:
        logger.error("failed to parse HTML: %s", exc)
        return urls

    for tag in soup.find_all(tag_name):
        if not isinstance(tag, Tag):
            continue
        value: Optional[object] = tag.get(attr)
        if not isinstance(value, str) or not value:
            continue
        try:
            urls.append(resolve_url(value, base_url))
        except InvalidURLError as exc:
            logger.error("invalid %s '%s': %s", attr, value, exc)
    return urls


def get_urls_from_html(html: str, base_url: str) -> List[str]:
    """Absolute URLs of every ``<a href>`` in *html*, resolved against *base_url*."""
    return _collect(html, base_url, "a", "href")


def get_images_from_html(html: str, base_url: str) -> List[str]:
    """Absolute URLs of every ``<img src>`` in *html*, resolved against *base_url*."""
    return _collect(html, base_url, "img", "src")
