# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict, List, Tuple, Union

import pytest
import pytest_asyncio
from aiohttp import web

from sitemap_scan.config import ScanConfig

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

#: path -> XML text (``{base}`` is replaced with the server origin), raw bytes, or an HTTP status
Docs = Dict[str, Union[str, bytes, int]]


def urlset(*locs: str) -> str:
    entries = "".join(f"<url><loc>{loc}</loc></url>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{SITEMAP_NS}">{entries}</urlset>'


def sitemapindex(*locs: str) -> str:
    entries = "".join(f"<sitemap><loc>{loc}</loc></sitemap>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><sitemapindex xmlns="{SITEMAP_NS}">{entries}</sitemapindex>'


class SitemapSite:
    """Serves fixed documents by path and records every request."""

    def __init__(self, docs: Docs) -> None:
        self.docs = docs
        self.requests: List[Tuple[str, str]] = []
        self.user_agents: List[str] = []

    def get_paths(self) -> List[str]:
        return [path for method, path in self.requests if method == "GET"]

    async def handle(self, request: web.Request) -> web.StreamResponse:
        self.requests.append((request.method, request.path))
        self.user_agents.append(request.headers.get("User-Agent", ""))
        doc = self.docs.get(request.path)
        if doc is None:
            return web.Response(status=404)
        if isinstance(doc, int):
            return web.Response(status=doc)
        if request.method == "HEAD":
            return web.Response(status=200)
        if isinstance(doc, str):
            doc = doc.replace("{base}", f"http://{request.host}").encode("utf-8")
        return web.Response(body=doc, content_type="application/xml")

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self.handle)
        return app


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[Callable[[Docs], Awaitable[Tuple[str, SitemapSite]]]]:
    """Start a local sitemap server per call; yields ``(base_url, site)``."""
    runners: List[web.AppRunner] = []

    async def _serve(docs: Docs) -> Tuple[str, SitemapSite]:
        site = SitemapSite(docs)
        runner = web.AppRunner(site.app())
        await runner.setup()
        runners.append(runner)
        port = unused_tcp_port_factory()
        await web.TCPSite(runner, "127.0.0.1", port).start()
        return f"http://127.0.0.1:{port}", site

    try:
        yield _serve
    finally:
        for runner in runners:
            await runner.cleanup()


@pytest.fixture()
def config() -> ScanConfig:
    """Return a basic ScanConfig for network tests."""
    return ScanConfig(user_agent="TestAgent/1.0", timeout=5.0)
