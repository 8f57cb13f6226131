"""Behavior-focused tests for the `cwdline` command line."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from cwdline import __version__
from cwdline.__main__ import cli
from cwdline.constants import ELLIPSIS, SEPARATOR_THIN

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def isolated_env(monkeypatch, tmp_path: Path) -> Path:
    """Home under ``tmp_path`` and a config dir with no config file."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("CWDLINE_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("GOPATH", raising=False)
    monkeypatch.delenv("CWDLINE_CONFIG", raising=False)
    return home


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"cwdline {__version__}"


def test_show_text_output(runner: CliRunner, isolated_env: Path) -> None:
    result = runner.invoke(cli, ["show", str(isolated_env / "a" / "b"), "--shell", "bare"])

    assert result.exit_code == 0, result.output
    assert result.output == f"~ a {SEPARATOR_THIN} b\n"


def test_show_truncates_with_max_depth(runner: CliRunner, isolated_env: Path) -> None:
    target = isolated_env / "a" / "b" / "c" / "d" / "e"
    result = runner.invoke(cli, ["show", str(target), "--max-depth", "3", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [item["content"] for item in payload] == ["~", "a", ELLIPSIS, "e"]
    assert [item["origin"] for item in payload] == ["cwd-path", "cwd-path", "cwd-path", "cwd"]
    assert payload[0]["separator"] is None


def test_show_dironly_mode(runner: CliRunner, isolated_env: Path) -> None:
    result = runner.invoke(cli, ["show", str(isolated_env / "x" / "y"), "--mode", "dironly"])

    assert result.exit_code == 0, result.output
    assert result.output == "y\n"


def test_show_detects_project_root(runner: CliRunner, isolated_env: Path) -> None:
    project = isolated_env / "code" / "site"
    (project / ".git").mkdir(parents=True)
    (project / "package.json").write_text("{}", encoding="utf-8")

    result = runner.invoke(cli, ["show", str(project / "web"), "--json"])

    assert result.exit_code == 0, result.output
    assert [item["content"] for item in json.loads(result.output)] == ["JS", "site/web"]


def test_show_reads_config_file(runner: CliRunner, isolated_env: Path, tmp_path: Path) -> None:
    config_file = tmp_path / "custom.toml"
    config_file.write_text('[cwd]\nmode = "plain"\n', encoding="utf-8")

    result = runner.invoke(
        cli, ["show", str(isolated_env / "docs"), "--config", str(config_file)]
    )

    assert result.exit_code == 0, result.output
    assert result.output == "~/docs\n"


def test_cli_flags_override_config(runner: CliRunner, isolated_env: Path, tmp_path: Path) -> None:
    config_file = tmp_path / "custom.toml"
    config_file.write_text('[cwd]\nmode = "plain"\n', encoding="utf-8")

    result = runner.invoke(
        cli,
        ["show", str(isolated_env / "docs"), "--config", str(config_file), "--mode", "dironly"],
    )

    assert result.exit_code == 0, result.output
    assert result.output == "docs\n"


def test_invalid_config_is_reported(runner: CliRunner, isolated_env: Path, tmp_path: Path) -> None:
    config_file = tmp_path / "broken.toml"
    config_file.write_text("[cwd\n", encoding="utf-8")

    result = runner.invoke(cli, ["show", str(isolated_env), "--config", str(config_file)])

    assert result.exit_code == 1
    assert "Invalid config" in result.output


def test_bare_invocation_uses_pwd(runner: CliRunner, isolated_env: Path, monkeypatch) -> None:
    monkeypatch.setenv("PWD", str(isolated_env / "notes"))

    result = runner.invoke(cli, [])

    assert result.exit_code == 0, result.output
    assert result.output == "~ notes\n"


def test_bare_invocation_reads_config_env(
    runner: CliRunner, isolated_env: Path, tmp_path: Path, monkeypatch
) -> None:
    config_file = tmp_path / "custom.toml"
    config_file.write_text('[cwd]\nmode = "plain"\n', encoding="utf-8")
    monkeypatch.setenv("CWDLINE_CONFIG", str(config_file))
    monkeypatch.setenv("PWD", str(isolated_env / "docs"))

    result = runner.invoke(cli, [])

    assert result.exit_code == 0, result.output
    assert result.output == "~/docs\n"


def test_config_path(runner: CliRunner, isolated_env: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["config", "path"])

    assert result.exit_code == 0
    assert result.output.strip() == str(tmp_path / "config" / "config.toml")


def test_config_init_refuses_to_overwrite(runner: CliRunner, isolated_env: Path, tmp_path: Path) -> None:
    first = runner.invoke(cli, ["config", "init"])
    second = runner.invoke(cli, ["config", "init"])
    forced = runner.invoke(cli, ["config", "init", "--force"])

    assert first.exit_code == 0, first.output
    assert (tmp_path / "config" / "config.toml").is_file()
    assert second.exit_code == 1
    assert "already exists" in second.output
    assert forced.exit_code == 0
