# File: sitemap_scan/models.py
"""
Data models for sitemap documents and scan results.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

DocumentKind = Literal["index", "urlset", "unknown"]


@dataclass(slots=True)
class SitemapDocument:
    """Parsed sitemap body: either an index of sitemaps or a set of page URLs."""

    kind: DocumentKind = "unknown"
    sitemaps: List[str] = field(default_factory=list)
    urls: List[str] = field(default_factory=list)

    @property
    def is_index(self) -> bool:
        return self.kind == "index"


@dataclass(slots=True)
class ScanResult:
    """Aggregate of a sitemap tree walk.

    ``sub_sitemaps`` and ``content_urls`` keep discovery order and are not
    deduplicated. ``failed`` lists sitemap URLs whose fetch or parse failed,
    so an empty result can be told apart from a suppressed error.
    """

    sub_sitemaps: List[str] = field(default_factory=list)
    content_urls: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def extend(self, other: ScanResult) -> None:
        self.sub_sitemaps.extend(other.sub_sitemaps)
        self.content_urls.extend(other.content_urls)
        self.failed.extend(other.failed)

    @property
    def complete(self) -> bool:
        return not self.failed
