# sitemap_scan/crawler/fetcher.py
"""
Fetcher module: HEAD existence checks and full GET downloads of sitemap documents.
"""
from __future__ import annotations

import asyncio
from typing import Dict

from aiohttp import ClientError, ClientSession
from yarl import URL

from sitemap_scan.config import ScanConfig
from sitemap_scan.exceptions import SitemapFetchError
from sitemap_scan.logger import logger


def check_url(url: str) -> None:
    """Raise SitemapFetchError unless *url* is an absolute http(s) URL with an IDNA-encodable host."""
    try:
        parsed = URL(url)
        if not parsed.is_absolute() or parsed.scheme not in ("http", "https") or not parsed.host:
            raise SitemapFetchError(url, "not an absolute http(s) URL")
        parsed.host.encode("idna")
    except (ValueError, UnicodeError) as exc:
        raise SitemapFetchError(url, f"invalid URL: {exc}") from exc


class Fetcher:
    """Issues requests on a shared session with the configured User-Agent.

    No retries are made: a single failed attempt is final for that URL.
    """

    def __init__(self, session: ClientSession, config: ScanConfig) -> None:
        self.session = session
        self.config = config

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    async def exists(self, url: str) -> bool:
        """Metadata-only check: True if HEAD answers with a non-error status."""
        try:
            check_url(url)
            async with self.session.head(url, headers=self.headers, allow_redirects=True) as resp:
                if resp.status >= 400:
                    logger.debug("HEAD %s -> HTTP %s", url, resp.status)
                    return False
                return True
        except (SitemapFetchError, ClientError, asyncio.TimeoutError, ValueError, UnicodeError) as exc:
            logger.debug("HEAD %s failed: %r", url, exc)
            return False

    async def fetch(self, url: str) -> bytes:
        """
        Download the full body of *url*.

        Raises SitemapFetchError on invalid URLs, transport errors, timeouts
        and HTTP error statuses.
        """
        check_url(url)
        try:
            async with self.session.get(url, headers=self.headers) as resp:
                if resp.status >= 400:
                    raise SitemapFetchError(url, f"HTTP {resp.status}")
                return await resp.read()
        except asyncio.TimeoutError as exc:
            raise SitemapFetchError(url, "request timed out") from exc
        except (ClientError, ValueError, UnicodeError) as exc:
            raise SitemapFetchError(url, str(exc) or type(exc).__name__) from exc
