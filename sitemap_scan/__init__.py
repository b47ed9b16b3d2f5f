# sitemap_scan/__init__.py
"""
Sitemap-Scan package initializer.
Defines package version and exposes the library entry point.
"""
__version__ = "1.0.0"

from sitemap_scan.scanner import get_links  # noqa: E402

__all__ = ["__version__", "get_links"]
