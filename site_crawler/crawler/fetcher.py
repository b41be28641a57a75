# site_crawler/crawler/fetcher.py
"""
Fetcher module: a single HTTP GET per call, reporting whether an HTML page came back.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

from aiohttp import ClientError, ClientSession

from site_crawler.logger import logger

__all__ = ("FetchError", "Fetcher")


class FetchError(RuntimeError):
    """Network-level failure: the request never produced a response."""


def _decode(body: bytes, get_encoding: Callable[[], str], url: str) -> str:
    """Decode *body* with the declared charset, utf-8 when that is not a text codec."""
    try:
        return body.decode(get_encoding(), errors="replace")
    except LookupError as exc:
        logger.warning("Undecodable charset (%s), falling back to utf-8: %s", exc, url)
        return body.decode("utf-8", errors="replace")


class Fetcher:
    """Fetches pages through a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def get_html(self, url: str) -> Optional[str]:
        """
        Fetch *url* and return its body when it is an HTML page.

        Returns None for a status >= 400 or a non-HTML content type.
        Raises FetchError on connection errors and timeouts.
        """
        logger.info("crawling %s", url)
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if resp.status > 399:
                    logger.warning("Got HTTP error: %s %s (%s)", resp.status, resp.reason, url)
                    return None

                ctype = resp.headers.get("Content-Type", "")
                if "text/html" not in ctype.lower():
                    logger.warning("Got non-HTML response: %s (%s)", ctype or "<none>", url)
                    return None

                body = await resp.read()
                return _decode(body, resp.get_encoding, url)
        except (ClientError, asyncio.TimeoutError) as exc:
            raise FetchError(f"Got network error: {str(exc) or type(exc).__name__}") from exc
