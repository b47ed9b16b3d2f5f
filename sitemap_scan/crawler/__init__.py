# File: sitemap_scan/crawler/__init__.py
"""sitemap_scan.crawler: Поиск главного sitemap и рекурсивный обход дерева sitemap."""

from .locator import find_main_sitemap, normalize_origin
from .walker import SitemapWalker

__all__ = ["find_main_sitemap", "normalize_origin", "SitemapWalker"]
