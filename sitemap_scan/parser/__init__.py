# File: sitemap_scan/parser/__init__.py
"""sitemap_scan.parser: Разбор XML-документов sitemap."""

from .sitemap_parser import decode_body, parse_sitemap_document

__all__ = ["decode_body", "parse_sitemap_document"]
