"""Unit tests for the afflink CLI."""

import json
from pathlib import Path

from typer.testing import CliRunner

from afflink import __version__
from afflink.cli import main
from afflink.cli.config import config
from afflink.cli.link import link
from afflink.cli.store import store

runner = CliRunner()


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"afflink {__version__}"


def test_invalid_display_format(capsys):
    assert main(["--display", "xml", "config", "show"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_no_subcommand_shows_help(capsys):
    assert main(["link"]) == 0
    assert "scan" in capsys.readouterr().out


def test_config_show_json(config_file: Path, capsys):
    assert main(["-d", "json", "config", "show", "site_url", "-c", str(config_file)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["content"] == {"site_url": "https://example.com"}


def test_link_scan_json(config_file: Path, capsys):
    assert main(["-d", "json", "link", "scan", "-c", str(config_file)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["files"] == 2
    assert output["external_links"] == 4
    assert len(output["links"]) == 4


def test_command_failure_exit_code(tmp_path: Path, capsys):
    assert main(["link", "scan", "-c", str(tmp_path / "missing.json")]) == 1
    assert "Config file not found" in capsys.readouterr().out


def test_config_init(isolated_cwd: Path):
    result = runner.invoke(config(), ["init"])
    assert result.exit_code == 0
    assert (isolated_cwd / "afflink.json").exists()
    assert "created: true" in result.stdout

    result = runner.invoke(config(), ["init"])
    assert result.exit_code == 1

    result = runner.invoke(config(), ["init", "--force"])
    assert result.exit_code == 0


def test_link_report_csv_prints_raw_report(config_file: Path):
    result = runner.invoke(link(), ["report", "-c", str(config_file), "-f", "csv", "--affiliate-only"])
    assert result.exit_code == 0
    assert "slug,name,url,is_affiliate,network" in result.stdout
    assert "cast-iron-skillet,Cast Iron Skillet,https://www.amazon.com/dp/B000A6PPOK?tag=mytag-20,true,amazon" in result.stdout


def test_link_report_to_file(config_file: Path, tmp_path: Path):
    target = tmp_path / "links.sql"
    result = runner.invoke(link(), ["report", "-c", str(config_file), "-f", "sql", "-o", str(target)])
    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8").startswith("INSERT INTO affiliate_links")


def test_link_transform_dry_run(config_file: Path, content_root: Path):
    before = (content_root / "posts" / "a.md").read_text(encoding="utf-8")
    result = runner.invoke(link(), ["transform", "-c", str(config_file), "--dry-run"])
    assert result.exit_code == 0
    assert "total_changes: 4" in result.stdout
    assert (content_root / "posts" / "a.md").read_text(encoding="utf-8") == before


def test_store_list_after_sync(json_store_config_file: Path):
    result = runner.invoke(link(), ["sync", "-c", str(json_store_config_file)])
    assert result.exit_code == 0

    result = runner.invoke(store(), ["list", "-c", str(json_store_config_file)])
    assert result.exit_code == 0
    assert "count: 3" in result.stdout

    result = runner.invoke(store(), ["show", "the-docs", "-c", str(json_store_config_file)])
    assert result.exit_code == 0
    assert "https://docs.python.org/3/library/re.html" in result.stdout


def test_store_show_missing_slug(json_store_config_file: Path):
    result = runner.invoke(store(), ["show", "nope", "-c", str(json_store_config_file)])
    assert result.exit_code == 1
