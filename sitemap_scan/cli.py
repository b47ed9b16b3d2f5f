# === FILE: sitemap_scan/cli.py ===
"""
Точка входа для запуска Sitemap-Scan через командную строку.

Режимы (ровно один):
  --main      Показать URL главного sitemap
  --subs      Показать все найденные вложенные sitemap
  --urls      Показать все найденные URL страниц

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (configs/default.yaml, если есть)
  --user-agent UA     Заголовок User-Agent
  --timeout SEC       Таймаут одного запроса (секунд)
  --max-depth INT     Максимальная глубина вложенности sitemap-индексов
  --concurrency INT   Число одновременно загружаемых дочерних sitemap
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)

Дополнительно:
  --version, -v       Показать версию Sitemap-Scan

Пример:
  sitemap-scan example.com --urls
"""
import asyncio
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from sitemap_scan import __version__
from sitemap_scan.config import ScanConfig, load_config
from sitemap_scan.crawler.locator import normalize_origin
from sitemap_scan.exceptions import InvalidDomainError
from sitemap_scan.logger import init_logging
from sitemap_scan.models import ScanResult
from sitemap_scan.scanner import find_main_sitemap, parse_sitemap

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
MODES = ("main", "subs", "urls")


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _resolve_mode(main: bool, subs: bool, urls: bool) -> str:
    chosen = [name for name, flag in zip(MODES, (main, subs, urls)) if flag]
    if len(chosen) != 1:
        raise click.UsageError('Please provide exactly one of --main, --subs or --urls.')
    return chosen[0]


def _build_config(config_path: Optional[Path], **overrides) -> ScanConfig:
    cfg = load_config(config_path)
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return cfg
    return ScanConfig(**{**cfg.model_dump(), **overrides})


async def _run(domain: str, mode: str, cfg: ScanConfig) -> Tuple[Optional[str], Optional[ScanResult]]:
    main_url = await find_main_sitemap(domain, cfg)
    if not main_url or mode == 'main':
        return main_url, None
    return main_url, await parse_sitemap(main_url, cfg)


def _echo_list(items, found_title: str, empty_message: str) -> None:
    if items:
        click.echo(f'\nFound {len(items)} {found_title}:')
        for item in items:
            click.echo(item)
    else:
        click.echo(f'\n{empty_message}')


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='Sitemap-Scan, version %(version)s')
@click.argument('domain')
@click.option('--main', 'main', is_flag=True, help='Показать URL главного sitemap.')
@click.option('--subs', 'subs', is_flag=True, help='Показать все вложенные sitemap.')
@click.option('--urls', 'urls', is_flag=True, help='Показать все URL страниц.')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent.')
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут одного запроса (секунд).'
)
@click.option(
    '--max-depth', 'max_depth',
    type=click.IntRange(min=0),
    default=None,
    help='Максимальная глубина вложенности sitemap-индексов.'
)
@click.option(
    '--concurrency', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Число одновременно загружаемых дочерних sitemap.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
def cli(domain, main, subs, urls, config_path, user_agent, timeout, max_depth, concurrency,
        log_level, log_file):
    """Найти sitemap домена DOMAIN и вывести главный sitemap, вложенные sitemap или URL страниц."""
    mode = _resolve_mode(main, subs, urls)
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    try:
        cfg = _build_config(
            config_path,
            user_agent=user_agent,
            timeout=timeout,
            max_depth=max_depth,
            concurrency=concurrency,
        )
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    try:
        normalize_origin(domain)
    except InvalidDomainError as e:
        print_error(str(e))

    main_url, result = asyncio.run(_run(domain, mode, cfg))
    if not main_url:
        print_error(f'Could not find a sitemap for {domain}.')

    if mode == 'main':
        click.echo('\nMain Sitemap URL:')
        click.echo(main_url)
        return

    if mode == 'subs':
        _echo_list(result.sub_sitemaps, 'Sub-Sitemap URLs', 'No sub-sitemaps found.')
    else:
        _echo_list(result.content_urls, 'Content URLs', 'No content URLs found in the sitemap(s).')

    if result.failed:
        click.secho(
            f'Warning: {len(result.failed)} sitemap(s) could not be fetched or parsed.',
            fg='yellow',
            err=True,
        )


def main():
    cli()


if __name__ == "__main__":
    main()
