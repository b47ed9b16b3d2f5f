# === FILE: sitemap_scan/logger.py ===
"""Logging for Sitemap-Scan.

Progress and diagnostics go to stderr (and optionally a rotating file);
stdout carries only the URLs printed by the CLI::

    from sitemap_scan.logger import logger
    logger.info("Parsing %s...", url)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

LOGGER_NAME: Final[str] = "SitemapScan"
_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"
_MAX_LOG_BYTES: Final[int] = 2 * 1024 * 1024

_LevelT = Union[int, str]


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Attach a stderr handler and, if *log_file* is given, a rotating file handler."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=2, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Reset the project logger; used by the CLI on every run."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME"]
