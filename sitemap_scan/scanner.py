# === FILE: sitemap_scan/scanner.py ===
"""
Точка входа для встраивания: поиск главного sitemap и обход его дерева.
"""
from __future__ import annotations

from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout

from sitemap_scan.config import ScanConfig
from sitemap_scan.crawler.locator import find_main_sitemap as _locate
from sitemap_scan.crawler.walker import SitemapWalker
from sitemap_scan.models import ScanResult

__all__ = ["SitemapScanner", "find_main_sitemap", "parse_sitemap", "get_links"]


class SitemapScanner:
    """Асинхронный контекст с одной HTTP-сессией на весь запуск."""

    def __init__(self, config: Optional[ScanConfig] = None) -> None:
        self.config = config or ScanConfig()
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> SitemapScanner:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def _require_session(self) -> ClientSession:
        if not self.session:
            raise RuntimeError("Session not initialized")
        return self.session

    async def find_main_sitemap(self, domain: str) -> Optional[str]:
        return await _locate(self._require_session(), domain, self.config)

    async def parse_sitemap(self, sitemap_url: str) -> ScanResult:
        return await SitemapWalker(self._require_session(), self.config).walk(sitemap_url)

    async def get_links(self, domain: str) -> List[str]:
        main_url = await self.find_main_sitemap(domain)
        if not main_url:
            return []
        result = await self.parse_sitemap(main_url)
        return result.content_urls


async def find_main_sitemap(domain: str, config: Optional[ScanConfig] = None) -> Optional[str]:
    """Возвращает URL главного sitemap домена или None, если он не найден."""
    async with SitemapScanner(config) as scanner:
        return await scanner.find_main_sitemap(domain)


async def parse_sitemap(sitemap_url: str, config: Optional[ScanConfig] = None) -> ScanResult:
    """Рекурсивно обходит sitemap и возвращает ScanResult."""
    async with SitemapScanner(config) as scanner:
        return await scanner.parse_sitemap(sitemap_url)


async def get_links(domain: str, config: Optional[ScanConfig] = None) -> List[str]:
    """
    Находит sitemap домена и возвращает плоский список URL страниц.

    Parameters
    ----------
    domain : str
        Хост (``example.com``) или полный URL.
    config : ScanConfig, optional
        Конфигурация; по умолчанию ``ScanConfig()``.

    Returns
    -------
    List[str]
        Адреса страниц в порядке обнаружения; пустой список, если sitemap не найден.
    """
    async with SitemapScanner(config) as scanner:
        return await scanner.get_links(domain)
