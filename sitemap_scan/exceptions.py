# File: sitemap_scan/exceptions.py
"""sitemap_scan.exceptions: Exception hierarchy for sitemap discovery and parsing."""

from __future__ import annotations

__all__ = [
    "SitemapScanError",
    "InvalidDomainError",
    "SitemapFetchError",
    "SitemapParseError",
]


class SitemapScanError(Exception):
    """Base class for all errors raised by sitemap_scan."""


class InvalidDomainError(SitemapScanError, ValueError):
    """The domain string does not resolve to an absolute http(s) origin."""


class SitemapFetchError(SitemapScanError):
    """A sitemap document could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class SitemapParseError(SitemapScanError):
    """A sitemap body is not well-formed XML."""
