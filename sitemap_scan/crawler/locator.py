# sitemap_scan/crawler/locator.py
"""
Locates the main sitemap of a domain by probing conventional paths.
"""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

from aiohttp import ClientSession

from sitemap_scan.config import ScanConfig
from sitemap_scan.crawler.fetcher import Fetcher
from sitemap_scan.exceptions import InvalidDomainError
from sitemap_scan.logger import logger

__all__ = ("normalize_origin", "find_main_sitemap")

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_origin(domain: str) -> str:
    """
    Reduce *domain* to ``scheme://host[:port]``.

    Bare hosts get ``https://``. Path, query, fragment, credentials and a
    default port are dropped.
    """
    raw = domain.strip()
    if not _SCHEME_RE.match(raw):
        raw = f"https://{raw}"
    parsed = urlparse(raw)
    try:
        host = parsed.hostname
        port = parsed.port
    except ValueError as exc:
        raise InvalidDomainError(f"invalid domain {domain!r}: {exc}") from exc
    if not host or re.search(r"\s", host):
        raise InvalidDomainError(f"invalid domain {domain!r}")
    try:
        host.encode("idna")
    except UnicodeError as exc:
        raise InvalidDomainError(f"invalid domain {domain!r}: {exc}") from exc

    scheme = parsed.scheme.lower()
    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    return f"{scheme}://{netloc}"


async def find_main_sitemap(session: ClientSession, domain: str, config: ScanConfig) -> Optional[str]:
    """
    Return the first candidate sitemap URL that passes a HEAD check, or None.

    Candidates are tried strictly in order; once one succeeds the rest are
    never requested.
    """
    origin = normalize_origin(domain)
    fetcher = Fetcher(session, config)
    logger.info("Searching for a sitemap on %s...", origin)

    for path in config.candidate_paths:
        sitemap_url = f"{origin}{path}"
        if await fetcher.exists(sitemap_url):
            logger.info("Found main sitemap at: %s", sitemap_url)
            return sitemap_url

    logger.info("Could not find a sitemap for %s.", domain)
    return None
