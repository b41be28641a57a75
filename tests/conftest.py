# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator
from typing import Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from aiohttp import web

from site_crawler.config import CrawlerConfig


class SiteStub:
    """
    In-memory site served by aiohttp: path -> (body, content type, status, charset).
    Unknown paths answer 404. Every request is recorded.
    """

    def __init__(self) -> None:
        self.base_url: str = ""
        self.pages: Dict[str, Tuple[str, str, int, Optional[str]]] = {}
        self.hits: Counter[str] = Counter()
        self.requests: List[str] = []
        self.user_agents: List[Optional[str]] = []

    def add(
        self,
        path: str,
        body: str = "",
        content_type: str = "text/html",
        status: int = 200,
        charset: Optional[str] = None,
    ) -> None:
        self.pages[path] = (body, content_type, status, charset)

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def handle(self, request: web.Request) -> web.Response:
        self.hits[request.path] += 1
        self.requests.append(request.path)
        self.user_agents.append(request.headers.get("User-Agent"))
        if request.path not in self.pages:
            return web.Response(status=404, text="not found")
        body, content_type, status, charset = self.pages[request.path]
        if charset is not None:
            # raw header: aiohttp would reject a charset that is not a text codec
            headers = {"Content-Type": f"{content_type}; charset={charset}"}
            return web.Response(body=body.encode("utf-8"), status=status, headers=headers)
        return web.Response(text=body, content_type=content_type, status=status)


@pytest_asyncio.fixture
async def site(unused_tcp_port: int) -> AsyncIterator[SiteStub]:
    """Start a SiteStub on 127.0.0.1, yield it, ensure cleanup."""
    stub = SiteStub()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", stub.handle)
    runner = web.AppRunner(app)
    await runner.setup()
    tcp_site = web.TCPSite(runner, "127.0.0.1", unused_tcp_port)
    await tcp_site.start()
    stub.base_url = f"http://127.0.0.1:{unused_tcp_port}"
    try:
        yield stub
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a basic valid CrawlerConfig.
    """
    return CrawlerConfig(base_url="https://blog.boot.dev", timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def sample_html() -> str:
    return """
    <html><body>
      <h1>Test Title</h1>
      <p>This is the first paragraph.</p>
      <a href="/link1">Link 1</a>
      <img src="/image1.jpg" alt="Image 1">
    </body></html>
    """
