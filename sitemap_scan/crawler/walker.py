# sitemap_scan/crawler/walker.py
"""
Recursive walker over a sitemap-index tree.
"""
from __future__ import annotations

import asyncio
from typing import List, Sequence, Tuple

from aiohttp import ClientSession

from sitemap_scan.config import ScanConfig
from sitemap_scan.crawler.fetcher import Fetcher
from sitemap_scan.exceptions import SitemapScanError
from sitemap_scan.logger import logger
from sitemap_scan.models import ScanResult, SitemapDocument
from sitemap_scan.parser.sitemap_parser import decode_body, parse_sitemap_document

__all__ = ("SitemapWalker",)


class SitemapWalker:
    """Depth-first walk from one sitemap URL, collecting sub-sitemaps and page URLs.

    Each index level records its own entries before the results of its
    children, and children are merged in the order the index lists them.
    A sitemap already on the current ancestor chain is listed but not
    walked again; nesting below ``config.max_depth`` is not walked.
    """

    def __init__(self, session: ClientSession, config: ScanConfig) -> None:
        self.config = config
        self.fetcher = Fetcher(session, config)
        self._semaphore = asyncio.Semaphore(config.concurrency)

    async def walk(self, sitemap_url: str) -> ScanResult:
        return await self._walk(sitemap_url, ())

    async def _walk(self, url: str, chain: Tuple[str, ...]) -> ScanResult:
        result = ScanResult()
        logger.info("Parsing %s...", url)
        try:
            document = await self._load(url)
        except SitemapScanError as exc:
            logger.error("An error occurred with sitemap %s: %s", url, exc)
            result.failed.append(url)
            return result

        if document.sitemaps:
            result.sub_sitemaps.extend(document.sitemaps)
            chain = chain + (url,)
            if len(chain) > self.config.max_depth:
                logger.warning(
                    "Max depth %d reached at %s, %d nested sitemap(s) not walked",
                    self.config.max_depth,
                    url,
                    len(document.sitemaps),
                )
            else:
                for nested in await self._walk_children(document.sitemaps, chain):
                    result.extend(nested)

        result.content_urls.extend(document.urls)
        return result

    async def _walk_children(self, locations: Sequence[str], chain: Tuple[str, ...]) -> List[ScanResult]:
        if self.config.concurrency > 1:
            return list(await asyncio.gather(*(self._walk_child(loc, chain) for loc in locations)))
        return [await self._walk_child(loc, chain) for loc in locations]

    async def _walk_child(self, location: str, chain: Tuple[str, ...]) -> ScanResult:
        if location in chain:
            logger.warning("Sitemap %s references its ancestor %s, skipping", chain[-1], location)
            return ScanResult()
        return await self._walk(location, chain)

    async def _load(self, url: str) -> SitemapDocument:
        # the slot is held only for the download, never across recursion
        async with self._semaphore:
            body = await self.fetcher.fetch(url)
        return parse_sitemap_document(decode_body(body))
