# File: tests/test_cli.py
"""Тесты для CLI (`sitemap_scan/cli.py`) с использованием click.testing.CliRunner.
Сетевые корутины подменяются, проверяются режимы вывода, коды выхода и ошибки.
"""
import json

import pytest
from click.testing import CliRunner

import sitemap_scan.cli as cli_module
from sitemap_scan.cli import cli
from sitemap_scan.crawler.locator import normalize_origin
from sitemap_scan.logger import init_logging
from sitemap_scan.models import ScanResult

SUB = "https://example.com/sitemap-posts.xml"
POSTS = ["https://example.com/p1", "https://example.com/p2"]


class FakeSite:
    """Only /sitemap.xml exists; it is an index of one posts urlset."""

    def __init__(self, found: bool = True, failed=()):
        self.found = found
        self.failed = list(failed)
        self.calls = []
        self.configs = []

    async def find_main_sitemap(self, domain, cfg):
        self.calls.append(("find", domain))
        self.configs.append(cfg)
        return f"{normalize_origin(domain)}/sitemap.xml" if self.found else None

    async def parse_sitemap(self, url, cfg):
        self.calls.append(("parse", url))
        return ScanResult(sub_sitemaps=[SUB], content_urls=list(POSTS), failed=list(self.failed))


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    init_logging()


@pytest.fixture()
def fake_site(monkeypatch):
    site = FakeSite()
    monkeypatch.setattr(cli_module, "find_main_sitemap", site.find_main_sitemap)
    monkeypatch.setattr(cli_module, "parse_sitemap", site.parse_sitemap)
    return site


@pytest.fixture()
def missing_site(monkeypatch):
    site = FakeSite(found=False)
    monkeypatch.setattr(cli_module, "find_main_sitemap", site.find_main_sitemap)
    monkeypatch.setattr(cli_module, "parse_sitemap", site.parse_sitemap)
    return site


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "Sitemap-Scan" in result.output


def test_main_mode(fake_site):
    result = CliRunner().invoke(cli, ["example.com", "--main"])
    assert result.exit_code == 0
    assert "Main Sitemap URL:" in result.output
    assert "https://example.com/sitemap.xml" in result.output
    assert fake_site.calls == [("find", "example.com")]


def test_subs_mode(fake_site):
    result = CliRunner().invoke(cli, ["example.com", "--subs"])
    assert result.exit_code == 0
    assert "Found 1 Sub-Sitemap URLs:" in result.output
    assert SUB in result.output
    assert fake_site.calls[-1] == ("parse", "https://example.com/sitemap.xml")


def test_urls_mode(fake_site):
    result = CliRunner().invoke(cli, ["example.com", "--urls"])
    assert result.exit_code == 0
    assert "Found 2 Content URLs:" in result.output
    lines = result.output.splitlines()
    assert lines.index(POSTS[0]) < lines.index(POSTS[1])


def test_mode_flag_may_precede_domain(fake_site):
    result = CliRunner().invoke(cli, ["--urls", "example.com"])
    assert result.exit_code == 0
    assert POSTS[1] in result.output


def test_empty_results_messages(monkeypatch):
    async def find(domain, cfg):
        return "https://example.com/sitemap.xml"

    async def parse(url, cfg):
        return ScanResult()

    monkeypatch.setattr(cli_module, "find_main_sitemap", find)
    monkeypatch.setattr(cli_module, "parse_sitemap", parse)

    runner = CliRunner()
    subs = runner.invoke(cli, ["example.com", "--subs"])
    urls = runner.invoke(cli, ["example.com", "--urls"])
    assert subs.exit_code == 0 and "No sub-sitemaps found." in subs.output
    assert urls.exit_code == 0 and "No content URLs found in the sitemap(s)." in urls.output


@pytest.mark.parametrize("mode", ["--main", "--subs", "--urls"])
def test_no_sitemap_exits_non_zero(missing_site, mode):
    result = CliRunner().invoke(cli, ["example.com", mode])
    assert result.exit_code != 0
    assert "Could not find a sitemap" in result.output
    assert all(url not in result.output for url in POSTS + [SUB])
    assert [call[0] for call in missing_site.calls] == ["find"]


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["example.com"],
        ["--urls"],
        ["example.com", "--bogus"],
        ["example.com", "--subs", "--urls"],
    ],
)
def test_usage_errors_before_network(fake_site, args):
    result = CliRunner().invoke(cli, args)
    assert result.exit_code == 2
    assert fake_site.calls == []


def test_invalid_domain(fake_site):
    result = CliRunner().invoke(cli, ["https://", "--main"])
    assert result.exit_code == 1
    assert "invalid domain" in result.output
    assert fake_site.calls == []


def test_partial_failure_warning(monkeypatch):
    site = FakeSite(failed=["https://example.com/broken.xml"])
    monkeypatch.setattr(cli_module, "find_main_sitemap", site.find_main_sitemap)
    monkeypatch.setattr(cli_module, "parse_sitemap", site.parse_sitemap)

    result = CliRunner().invoke(cli, ["example.com", "--urls"])
    assert result.exit_code == 0
    assert POSTS[0] in result.output
    assert "1 sitemap(s) could not be fetched or parsed" in result.output


def test_options_override_config(fake_site, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg_file = tmp_path / "scan.json"
    cfg_file.write_text(json.dumps({"user_agent": "FromFile/2.0", "max_depth": 4}), encoding="utf-8")

    result = CliRunner().invoke(
        cli,
        ["example.com", "--main", "--config", str(cfg_file), "--max-depth", "2", "--concurrency", "3"],
    )
    assert result.exit_code == 0
    cfg = fake_site.configs[0]
    assert cfg.user_agent == "FromFile/2.0"
    assert cfg.max_depth == 2
    assert cfg.concurrency == 3


def test_bad_config_file(fake_site, tmp_path):
    cfg_file = tmp_path / "scan.yaml"
    cfg_file.write_text("unknown_option: 1", encoding="utf-8")

    result = CliRunner().invoke(cli, ["example.com", "--main", "--config", str(cfg_file)])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output
    assert fake_site.calls == []


def test_log_file_written(fake_site, tmp_path):
    log_file = tmp_path / "scan.log"
    result = CliRunner().invoke(
        cli, ["example.com", "--main", "--log-file", str(log_file), "--log-level", "DEBUG"]
    )
    assert result.exit_code == 0
    assert log_file.exists()


def test_unencodable_domain(fake_site):
    result = CliRunner().invoke(cli, ["a" * 70 + ".com", "--urls"])
    assert result.exit_code == 1
    assert "invalid domain" in result.output
    assert fake_site.calls == []
