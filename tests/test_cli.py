"""Tests for the root selectorkit CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "selectorkit" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "selectorkit build" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-selectorkit.toml", "--version"])
    assert result.exit_code == 0


def test_config_file_applies(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text("quiet = true\n")
    result = cli_runner.invoke(cli, ["-c", str(config), "build", "id=main"])
    assert result.exit_code == 0
    assert result.output == "#main\n"


def test_invalid_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "selectorkit.toml").write_text("[output\n")
    result = cli_runner.invoke(cli, ["build", "id=main"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


# --- Commands registered ---


@pytest.mark.parametrize("name", ["build", "render"])
def test_command_registered(name: str) -> None:
    assert name in cli.commands


def test_env_var_enables_flag(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SELECTORKIT_QUIET", "1")
    result = cli_runner.invoke(cli, ["build", "element=a"])
    assert result.exit_code == 0
    assert result.output == "a\n"
