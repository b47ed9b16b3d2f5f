# File: sitemap_scan/parser/sitemap_parser.py
"""sitemap_scan.parser.sitemap_parser: Разбор sitemap.xml и классификация документа."""

from __future__ import annotations

import gzip
import zlib
from typing import List, Union

from lxml import etree

from sitemap_scan.models import SitemapDocument
from sitemap_scan.exceptions import SitemapParseError

_GZIP_MAGIC = b"\x1f\x8b"


def decode_body(body: bytes) -> bytes:
    """Распаковывает gzip-тело (sitemap.xml.gz), остальные данные возвращает как есть."""
    if not body.startswith(_GZIP_MAGIC):
        return body
    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as exc:
        raise SitemapParseError(f"broken gzip stream: {exc}") from exc


def _entry_locs(root: etree._Element, entry_tag: str) -> tuple[bool, List[str]]:
    found = False
    locs: List[str] = []
    for entry in root.iterchildren(f"{{*}}{entry_tag}"):
        found = True
        loc = entry.find("{*}loc")
        if loc is not None and loc.text and loc.text.strip():
            locs.append(loc.text.strip())
    return found, locs


def parse_sitemap_document(content: Union[bytes, str]) -> SitemapDocument:
    """Разбирает XML sitemap и определяет его вид.

    Args:
        content: тело документа (bytes или str).

    Returns:
        SitemapDocument вида ``index`` (ссылки на другие sitemap из
        ``<sitemap><loc>``), ``urlset`` (адреса страниц из ``<url><loc>``)
        или ``unknown`` с пустыми списками для прочих документов.

    Raises:
        SitemapParseError: если тело не является корректным XML.

    Пример:
    ```python
    from sitemap_scan.parser.sitemap_parser import parse_sitemap_document

    with open('sitemap.xml', 'rb') as f:
        doc = parse_sitemap_document(f.read())
    print(doc.kind, doc.sitemaps or doc.urls)
    ```
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    parser = etree.XMLParser(ns_clean=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise SitemapParseError(str(exc)) from exc
    if root is None:
        raise SitemapParseError("empty document")

    name = etree.QName(root).localname
    if name == "sitemapindex":
        found, locs = _entry_locs(root, "sitemap")
        if found:
            return SitemapDocument(kind="index", sitemaps=locs)
    elif name == "urlset":
        found, locs = _entry_locs(root, "url")
        if found:
            return SitemapDocument(kind="urlset", urls=locs)
    return SitemapDocument()
